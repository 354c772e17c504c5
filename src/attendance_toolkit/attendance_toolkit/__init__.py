"""Attendance toolkit package.

Stateless helpers behind the attendance dashboard, organized by feature
modules (time_conversion, geofence, shifts, attendance_logs) with a thin
Flask controller layer on top.
"""

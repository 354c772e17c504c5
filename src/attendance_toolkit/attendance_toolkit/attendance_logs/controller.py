from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date
from ..common.http import json_endpoint
from ..container import Container
from ..core.exceptions import ValidationError


def register(app: Flask, container: Container) -> None:
    def _parse_date(value):
        if not value:
            return None
        try:
            return parse_iso_date(value)
        except (TypeError, ValueError):
            raise ValidationError(f"Invalid date: {value!r} (expected YYYY-MM-DD)") from None

    @app.route("/api/attendance-logs/rows", methods=["POST"], endpoint="attendance_log_rows")
    @json_endpoint
    def attendance_log_rows():
        body = request.get_json(silent=True)
        if not isinstance(body, dict):
            raise ValidationError("JSON body is required")

        filters = body.get("filters") or {}
        if not isinstance(filters, dict):
            raise ValidationError("filters must be an object")
        service = container.attendance_log_service

        rows = service.build_rows(body.get("logs"), body.get("locale"))
        rows = service.filter_rows(
            rows,
            location=filters.get("location") or "all",
            status=filters.get("status") or "all",
            date_from=_parse_date(filters.get("date_from")),
            date_to=_parse_date(filters.get("date_to")),
            sort_by=filters.get("sort_by") or "newest",
        )
        return jsonify({"rows": [r.to_dict() for r in rows], "total": len(rows)})

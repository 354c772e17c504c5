from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_endpoint
from ..common.validators import require_non_empty, require_number
from ..container import Container
from ..core.exceptions import ValidationError
from .distance import haversine_distance_meters, is_within_radius, parse_coordinate_string
from .map_links import extract_lat_lng_from_url


def register(app: Flask, container: Container) -> None:
    def _coordinate_arg(name: str):
        coords = parse_coordinate_string(require_non_empty(request.args.get(name), name))
        if coords is None:
            raise ValidationError(f"{name} must look like 'lat,lng'")
        return coords

    @app.route("/api/geofence/distance", methods=["GET"], endpoint="geofence_distance")
    @json_endpoint
    def geofence_distance():
        origin = _coordinate_arg("from")
        target = _coordinate_arg("to")
        meters = haversine_distance_meters(origin.lat, origin.lng, target.lat, target.lng)
        return jsonify({"meters": meters})

    @app.route("/api/geofence/check", methods=["POST"], endpoint="geofence_check")
    @json_endpoint
    def geofence_check():
        body = request.get_json(silent=True) or {}
        location = require_non_empty(body.get("location"), "location")
        latitude = require_number(body.get("latitude"), "latitude")
        longitude = require_number(body.get("longitude"), "longitude")
        radius = require_number(body.get("radius_meters"), "radius_meters")

        return jsonify({"within_radius": is_within_radius(location, latitude, longitude, radius)})

    @app.route("/api/geofence/extract", methods=["GET"], endpoint="geofence_extract")
    @json_endpoint
    def geofence_extract():
        url = require_non_empty(request.args.get("url"), "url")
        coords = extract_lat_lng_from_url(url)
        if coords is None:
            return jsonify({"success": False, "message": "No coordinates found in link"}), 404
        return jsonify(coords.to_dict())

from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_endpoint
from ..common.validators import require_non_empty
from ..container import Container
from .locale import resolve_locale


def register(app: Flask, container: Container) -> None:
    def _request_locale() -> str:
        explicit = request.args.get("locale")
        if explicit:
            return explicit
        return resolve_locale(
            request.args.get("lang") or request.cookies.get("lang"),
            request.accept_languages.best or container.time_service.default_locale,
        )

    @app.route("/api/time/now", methods=["GET"], endpoint="time_now")
    @json_endpoint
    def time_now():
        return jsonify({"utc": container.time_service.current_utc_iso()})

    @app.route("/api/time/convert", methods=["GET"], endpoint="time_convert")
    @json_endpoint
    def time_convert():
        value = require_non_empty(request.args.get("value"), "value")
        return jsonify(container.time_service.convert(value, _request_locale()))

    @app.route("/api/time/duration", methods=["GET"], endpoint="time_duration")
    @json_endpoint
    def time_duration():
        start = require_non_empty(request.args.get("start"), "start")
        end = request.args.get("end") or None

        seconds = container.time_service.duration_seconds(start, end)
        return jsonify({
            "seconds": seconds,
            "minutes": seconds // 60,
            "label": container.time_service.duration_summary(start, end).label if end else None,
        })

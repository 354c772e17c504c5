from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_endpoint
from ..container import Container
from ..core.exceptions import ValidationError
from .work_days import day_names_to_values, format_work_days, values_to_day_names


def register(app: Flask, container: Container) -> None:
    @app.route("/api/work-days", methods=["GET"], endpoint="work_days")
    @json_endpoint
    def work_days():
        values_s = request.args.get("values")
        names_s = request.args.get("names")

        if values_s:
            try:
                values = [int(v) for v in values_s.split(",") if v.strip()]
            except ValueError:
                raise ValidationError("values must be comma-separated integers") from None
        elif names_s:
            values = day_names_to_values([n.strip() for n in names_s.split(",")])
        else:
            raise ValidationError("values or names is required")

        names = values_to_day_names(values)
        return jsonify({
            "values": day_names_to_values(names),
            "names": names,
            "label": format_work_days(values),
        })

from __future__ import annotations

import importlib

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .attendance_logs.controller import register as register_attendance_logs
from .geofence.controller import register as register_geofence
from .shifts.controller import register as register_shifts
from .time_conversion.controller import register as register_time


def create_app(settings_module: str | None = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["DEFAULT_LOCALE"] = getattr(settings, "DEFAULT_LOCALE", "en-US")
    app.config["DISPLAY_TIMEZONE"] = getattr(settings, "DISPLAY_TIMEZONE", "")

    if app.config["DEBUG"]:
        print(
            "[attendance-toolkit] settings=", settings_module,
            " locale=", app.config["DEFAULT_LOCALE"],
            " tz=", app.config["DISPLAY_TIMEZONE"] or "local",
        )

    container = build_container(settings=app.config)

    register_time(app, container)
    register_geofence(app, container)
    register_shifts(app, container)
    register_attendance_logs(app, container)

    return app

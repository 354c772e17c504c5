from __future__ import annotations

from functools import wraps

from flask import current_app, jsonify

from ..core.exceptions import ValidationError


def json_endpoint(view):
    """Map ValidationError to 400 and unexpected errors to 500, both as JSON."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return jsonify({"success": False, "message": str(e)}), 400
        except Exception:
            current_app.logger.exception("unhandled error in %s", view.__name__)
            return jsonify({"success": False, "message": "Internal error"}), 500

    return wrapper

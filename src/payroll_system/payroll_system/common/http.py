from __future__ import annotations

import logging
from functools import wraps
from typing import Any, Optional

from flask import jsonify, request

from ..core.exceptions import InputError, NotFoundError, StorageError, ValidationError

logger = logging.getLogger(__name__)


def json_error(message: str, status: int, *, errors: Optional[list] = None):
    body: dict[str, Any] = {"message": message}
    if errors:
        body["errors"] = errors
    return jsonify(body), status


def api_errors(view):
    """Map domain exceptions raised by a JSON view to HTTP error responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except ValidationError as e:
            return json_error(str(e), 400, errors=[v.to_dict() for v in e.violations])
        except InputError as e:
            return json_error(str(e), 400)
        except NotFoundError as e:
            return json_error(str(e), 404)
        except StorageError as e:
            logger.error("Storage failure in %s: %s", request.path, e)
            return json_error("Internal storage error", 500)
        except Exception:
            logger.exception("Unhandled error in %s %s", request.method, request.path)
            return json_error("Internal server error", 500)

    return wrapper


def json_body() -> Any:
    return request.get_json(silent=True)


def current_actor() -> Optional[str]:
    """Opaque identifier of whoever issued the request (set by the identity layer)."""
    actor = request.headers.get("X-Actor", "").strip()
    return actor or None


def int_arg(name: str) -> Optional[int]:
    raw = request.args.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError:
        raise InputError(f"Query parameter {name!r} must be an integer")

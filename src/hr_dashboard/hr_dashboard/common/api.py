from __future__ import annotations

import logging
from dataclasses import asdict, is_dataclass
from decimal import Decimal
from enum import Enum
from functools import wraps

from flask import jsonify, session

from ..core.exceptions import (
    AuthenticationError,
    AuthorizationError,
    InvalidStateError,
    NotConfiguredError,
    NotFoundError,
    ValidationError,
)
from ..tenancy.context import AuthContext

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR = (
    (AuthenticationError, 401),
    (AuthorizationError, 403),
    (NotConfiguredError, 404),
    (NotFoundError, 404),
    (InvalidStateError, 409),
    (ValidationError, 400),
)


def to_json(value):
    """Dataclasses to plain JSON values: Decimal as plain string, enums as their value."""

    if is_dataclass(value) and not isinstance(value, type):
        value = asdict(value)
    if isinstance(value, dict):
        return {k: to_json(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_json(v) for v in value]
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return format(value, "f")
    return value


def api_view(container):
    """Resolve the session identity, bind tenant services and map domain errors to JSON.

    The wrapped view receives `auth` and `services` keyword arguments.
    """

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            try:
                auth = AuthContext.from_session(session)
                services = container.for_tenant(auth.tenant)
                return view(*args, auth=auth, services=services, **kwargs)
            except tuple(cls for cls, _ in _STATUS_BY_ERROR) as e:
                status = next(code for cls, code in _STATUS_BY_ERROR if isinstance(e, cls))
                return jsonify({"success": False, "message": str(e)}), status
            except Exception:
                logger.exception("Unhandled error in %s", view.__name__)
                return jsonify({"success": False, "message": "Internal error while processing the request"}), 500

        return wrapper

    return decorator

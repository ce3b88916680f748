"""The events blueprint: recommendation cards and ratings."""

from flask import Blueprint

bp = Blueprint("events", __name__, url_prefix="/events")

from . import routes  # noqa: E402

__all__ = ["routes"]

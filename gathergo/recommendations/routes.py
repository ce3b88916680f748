"""Routes for the events blueprint."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from flask import current_app, g, jsonify, render_template, request

from gathergo.auth.decorators import login_required
from gathergo.errors import AccessDenied, ValidationError
from gathergo.extensions import csrf
from gathergo.group.services import GroupService
from gathergo.store import get_store

from . import bp
from .ledger import scoped_event_id
from .services import RecommendationService

if TYPE_CHECKING:
    from gathergo.group.models import Group

    from .ledger import RatingLedger
    from .models import EventRecommendation


def get_rating_ledger() -> RatingLedger:
    """Return the ledger the application was created with."""
    return current_app.extensions["rating_ledger"]


def _load_events(group_id: str) -> tuple[list[EventRecommendation], Group | None]:
    events, group = RecommendationService.get_group_recommendations(
        get_store(), group_id
    )
    return get_rating_ledger().apply_to(events, group_id), group


def _require_member(group_id: str, user_id: str) -> None:
    """Only members of a group may rate the events offered to it."""
    group = GroupService.get_group(get_store(), group_id)
    if not GroupService.is_member(group, user_id):
        current_app.logger.warning(
            f"User {user_id} tried to rate events of group {group_id}"
        )
        raise AccessDenied("Only group members can rate this group's events.")


@bp.route("/group/<string:group_id>", methods=["GET"])
@login_required
def view_events(group_id):
    """Render the recommendation cards for a group, top match first."""
    events, group = _load_events(group_id)
    ledger = get_rating_ledger()
    user_id = g.user["uid"]

    # None when the group could not be loaded; the cards render without it.
    total_voters = len(group.get("memberIds", [])) if group else None

    return render_template(
        "events/events.html",
        group_id=group_id,
        top_event=events[0],
        events=events[1:],
        total_voters=total_voters,
        my_ratings={
            event.id: ledger.get_rating(scoped_event_id(group_id, event.id), user_id)
            for event in events
        },
    )


@bp.route("/group/<string:group_id>/data", methods=["GET"])
@login_required
def events_data(group_id):
    """Return the group's recommendations as JSON."""
    events, _ = _load_events(group_id)
    return jsonify([event.to_dict() for event in events])


@bp.route("/group/<string:group_id>/rating/<string:event_id>", methods=["POST"])
@login_required
@csrf.exempt
def rate_event(group_id, event_id):
    """Record the current user's star rating for an event within a group."""
    payload: dict[str, Any] = request.get_json(silent=True) or {}
    stars = payload.get("stars")
    if stars is None:
        raise ValidationError("Missing 'stars'.")

    user_id = g.user["uid"]
    _require_member(group_id, user_id)
    result = get_rating_ledger().rate(
        scoped_event_id(group_id, event_id), user_id, stars
    )
    current_app.logger.info(
        f"User {user_id} rated event {event_id} in group {group_id}: {stars} stars"
    )
    return jsonify(result.to_dict())


@bp.route("/group/<string:group_id>/rating/<string:event_id>", methods=["GET"])
@login_required
def vote_status(group_id, event_id):
    """Tell the current user whether they have already rated an event."""
    ledger = get_rating_ledger()
    user_id = g.user["uid"]
    key = scoped_event_id(group_id, event_id)
    return jsonify(
        {
            "hasVoted": ledger.has_voted(key, user_id),
            "rating": ledger.get_rating(key, user_id),
            "votes": ledger.votes(key),
        }
    )

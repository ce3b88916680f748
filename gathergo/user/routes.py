"""Routes for the user blueprint."""

from __future__ import annotations

from typing import Any

from flask import flash, g, jsonify, redirect, render_template, url_for

from gathergo.auth.decorators import login_required
from gathergo.store import get_store

from . import bp
from .forms import PreferencesForm
from .services import PreferenceService


def _split_list(raw: str | None) -> list[str]:
    """Turn a comma separated form value into a list of trimmed entries."""
    return [item.strip() for item in (raw or "").split(",") if item.strip()]


def _preferences_from_form(form: PreferencesForm) -> dict[str, Any]:
    """Build a partial user document holding only the fields the user filled in."""
    user_data: dict[str, Any] = {}
    if form.name.data:
        user_data["name"] = form.name.data.strip()
    if form.email.data:
        user_data["email"] = form.email.data.strip().lower()

    preferences: dict[str, Any] = {}
    budget: dict[str, Any] = {}
    if form.budget_min.data is not None:
        budget["min"] = float(form.budget_min.data)
    if form.budget_max.data is not None:
        budget["max"] = float(form.budget_max.data)
    if form.currency.data:
        budget["currency"] = form.currency.data.strip().upper()
    if budget:
        preferences["budget"] = budget

    if activities := _split_list(form.activities.data):
        preferences["activities"] = activities
    if interests := _split_list(form.interests.data):
        preferences["interests"] = interests
    if time_slots := _split_list(form.time_slots.data):
        preferences["availability"] = {"timeSlots": time_slots}
    if form.notes.data:
        preferences["notes"] = form.notes.data.strip()

    if preferences:
        user_data["preferences"] = preferences
    return user_data


def _prefill(form: PreferencesForm, profile: dict[str, Any]) -> None:
    """Populate an unsubmitted form from a stored profile."""
    preferences = profile.get("preferences") or {}
    budget = preferences.get("budget") or {}
    availability = preferences.get("availability") or {}
    form.name.data = profile.get("name")
    form.email.data = profile.get("email")
    form.budget_min.data = budget.get("min")
    form.budget_max.data = budget.get("max")
    form.currency.data = budget.get("currency")
    form.activities.data = ", ".join(preferences.get("activities", []))
    form.interests.data = ", ".join(preferences.get("interests", []))
    form.time_slots.data = ", ".join(availability.get("timeSlots", []))
    form.notes.data = preferences.get("notes")


@bp.route("/preferences", methods=["GET", "POST"])
@login_required
def preferences():
    """Show and save the current user's trip preferences."""
    store = get_store()
    user_id = g.user["uid"]
    form = PreferencesForm()

    if form.validate_on_submit():
        PreferenceService.save_user_preferences(
            store, user_id, _preferences_from_form(form)
        )
        flash("Preferences saved.", "success")
        return redirect(url_for(".preferences"))

    if not form.is_submitted():
        profile = PreferenceService.get_user_profile(store, user_id)
        if profile:
            _prefill(form, dict(profile))

    return render_template("user/preferences.html", form=form)


@bp.route("/profile", methods=["GET"])
@login_required
def profile():
    """Return the current user's stored profile as JSON."""
    user_profile = PreferenceService.get_user_profile(get_store(), g.user["uid"])
    if user_profile is None:
        return jsonify({"error": "Profile not found."}), 404
    user_profile = dict(user_profile)
    user_profile.pop("updatedAt", None)
    return jsonify(user_profile)

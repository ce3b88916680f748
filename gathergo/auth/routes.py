"""Routes for the auth blueprint."""

from firebase_admin import auth
from flask import (
    current_app,
    flash,
    jsonify,
    redirect,
    render_template,
    request,
    session,
    url_for,
)

from gathergo.extensions import csrf

from . import bp


@bp.route("/login", methods=["GET"])
def login():
    """Render the login page. Sign-in itself happens in the Firebase JS SDK."""
    if "user_id" in session:
        return redirect(url_for("group.view_groups"))
    return render_template(
        "login.html",
        firebase_config={
            "apiKey": current_app.config.get("FIREBASE_API_KEY"),
            "authDomain": current_app.config.get("FIREBASE_AUTH_DOMAIN"),
            "projectId": current_app.config.get("FIREBASE_PROJECT_ID"),
        },
    )


@bp.route("/session_login", methods=["POST"])
@csrf.exempt
def session_login():
    """
    This endpoint is called from the client-side after a successful Firebase login.
    It receives the ID token, verifies it, and creates a server-side session.
    """
    payload = request.get_json(silent=True) or {}
    id_token = payload.get("idToken")
    if not id_token:
        return jsonify({"status": "error", "message": "Missing idToken."}), 400
    try:
        decoded_token = auth.verify_id_token(id_token)
    except (auth.InvalidIdTokenError, auth.ExpiredIdTokenError, ValueError) as e:
        current_app.logger.warning(f"Rejected session login: {e}")
        return jsonify({"status": "error", "message": "Invalid token."}), 401

    session.clear()
    session["user_id"] = decoded_token["uid"]
    current_app.logger.info(f"Session started for {decoded_token['uid']}")
    return jsonify({"status": "success"})


@bp.route("/logout")
def logout():
    """Clear the server-side session. Firebase sign-out happens client-side."""
    session.clear()
    flash("You have been logged out.", "success")
    return redirect(url_for("auth.login"))

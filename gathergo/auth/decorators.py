"""Decorators for the auth blueprint."""

from functools import wraps

from flask import jsonify, redirect, request, session, url_for


def login_required(f):
    """Redirect to the login page if the user is not logged in.

    JSON requests get a 401 response instead of a redirect.
    """

    @wraps(f)
    def decorated_function(*args, **kwargs):
        if "user_id" not in session:
            if request.is_json:
                return jsonify({"error": "Authentication required."}), 401
            return redirect(url_for("auth.login"))
        return f(*args, **kwargs)

    return decorated_function

"""Routes for the group blueprint."""

from flask import current_app, flash, g, redirect, render_template, url_for

from gathergo.auth.decorators import login_required
from gathergo.errors import AccessDenied, NotFoundError
from gathergo.store import get_store

from . import bp
from .forms import GroupForm, InviteByEmailForm, JoinGroupForm
from .services import GroupService


@bp.route("/", methods=["GET"])
@login_required
def view_groups():
    """List the user's groups alongside the create and join forms."""
    my_groups = GroupService.get_user_groups(get_store(), g.user["uid"])
    return render_template(
        "group/groups.html",
        my_groups=my_groups,
        create_form=GroupForm(),
        join_form=JoinGroupForm(),
    )


@bp.route("/create", methods=["POST"])
@login_required
def create_group():
    """Create a new group with the current user as its first member."""
    form = GroupForm()
    if not form.validate_on_submit():
        flash("Please give your trip a name.", "danger")
        return redirect(url_for(".view_groups"))

    group_id = GroupService.create_group(
        get_store(), g.user["uid"], form.name.data.strip()
    )
    flash("Group created successfully.", "success")
    return redirect(url_for(".view_group", group_id=group_id))


@bp.route("/join", methods=["POST"])
@login_required
def join_group():
    """Join an existing group by its id."""
    form = JoinGroupForm()
    if not form.validate_on_submit():
        flash("Please enter a group code.", "danger")
        return redirect(url_for(".view_groups"))

    group_id = form.group_id.data.strip()
    try:
        GroupService.join_group(get_store(), g.user["uid"], group_id)
    except NotFoundError:
        flash("Group not found.", "danger")
        return redirect(url_for(".view_groups"))

    flash("You joined the group!", "success")
    return redirect(url_for(".view_group", group_id=group_id))


@bp.route("/<string:group_id>", methods=["GET"])
@login_required
def view_group(group_id):
    """Display a single group's page."""
    group = GroupService.get_group(get_store(), group_id)
    return render_template(
        "group/group.html",
        group=group,
        is_member=GroupService.is_member(group, g.user["uid"]),
        is_creator=group.get("createdBy") == g.user["uid"],
        invite_form=InviteByEmailForm(),
    )


@bp.route("/<string:group_id>/invite", methods=["POST"])
@login_required
def invite(group_id):
    """Record an email invitation for the group."""
    form = InviteByEmailForm()
    if not form.validate_on_submit():
        flash("Please enter a valid email address.", "danger")
        return redirect(url_for(".view_group", group_id=group_id))

    try:
        GroupService.invite_email(
            get_store(), g.user["uid"], group_id, form.email.data
        )
    except AccessDenied as e:
        current_app.logger.warning(
            f"User {g.user['uid']} tried to invite to group {group_id}"
        )
        flash(e.message, "danger")
        return redirect(url_for(".view_group", group_id=group_id))

    flash(f"Invitation recorded for {form.email.data}.", "success")
    return redirect(url_for(".view_group", group_id=group_id))


@bp.route("/<string:group_id>/finalize", methods=["POST"])
@login_required
def finalize(group_id):
    """Mark the group's plan as finalized."""
    try:
        GroupService.finalize_group(get_store(), g.user["uid"], group_id)
    except AccessDenied as e:
        current_app.logger.warning(
            f"User {g.user['uid']} tried to finalize group {group_id}"
        )
        flash(e.message, "danger")
        return redirect(url_for(".view_group", group_id=group_id))

    flash("Plan finalized.", "success")
    return redirect(url_for(".view_group", group_id=group_id))

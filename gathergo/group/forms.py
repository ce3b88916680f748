"""Forms for the group blueprint."""

from flask_wtf import FlaskForm
from wtforms import StringField
from wtforms.validators import DataRequired, Email, Length


class GroupForm(FlaskForm):
    """Form for creating a new group."""

    name = StringField("Trip Name", validators=[DataRequired(), Length(max=100)])


class JoinGroupForm(FlaskForm):
    """Form for joining a group by its id."""

    group_id = StringField("Group Code", validators=[DataRequired()])


class InviteByEmailForm(FlaskForm):
    """Form for inviting someone to a group by email."""

    email = StringField("Email", validators=[DataRequired(), Email()])

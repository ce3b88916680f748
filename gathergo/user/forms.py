"""Forms for the user blueprint."""

from flask_wtf import FlaskForm
from wtforms import DecimalField, StringField, SubmitField, TextAreaField
from wtforms.validators import Email, Length, NumberRange, Optional


class PreferencesForm(FlaskForm):
    """Form for saving a user's trip preferences."""

    name = StringField("Name", validators=[Optional(), Length(max=80)])
    email = StringField("Email", validators=[Optional(), Email()])
    budget_min = DecimalField(
        "Minimum budget", validators=[Optional(), NumberRange(min=0)], places=2
    )
    budget_max = DecimalField(
        "Maximum budget", validators=[Optional(), NumberRange(min=0)], places=2
    )
    currency = StringField("Currency", validators=[Optional(), Length(min=3, max=3)])
    activities = StringField("Activities (comma separated)")
    interests = StringField("Vibes (comma separated)")
    time_slots = StringField("Free time slots (comma separated)")
    notes = TextAreaField("Notes")
    submit = SubmitField("Save Preferences")

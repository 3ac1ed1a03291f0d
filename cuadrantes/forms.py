"""WTForms form classes."""

from __future__ import annotations

from flask_wtf import FlaskForm
from wtforms import DateField, StringField
from wtforms.validators import Optional, Regexp


class CalendarQueryForm(FlaskForm):
    """Query string of the calendar endpoints (``?month=YYYY-MM&today=YYYY-MM-DD``)."""

    class Meta:
        csrf = False

    month = StringField(
        "Mes",
        validators=[Optional(), Regexp(r"^\d{4}-(0[1-9]|1[0-2])$", message="Mes invalido, formato YYYY-MM.")],
        filters=[lambda value: value.strip() if value else value],
    )
    today = DateField("Hoy", validators=[Optional()], format="%Y-%m-%d")

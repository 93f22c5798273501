import math

from wtforms import Form, FloatField, IntegerField, StringField, ValidationError
from wtforms.validators import InputRequired, Optional


def _upper(value):
    return value.strip().upper() if value else value


class NearestHospitalForm(Form):
    """Query-string parameters accepted by the nearest-hospital lookup."""
    lat = FloatField('Latitude', validators=[InputRequired()])
    lng = FloatField('Longitude', validators=[InputRequired()])
    limit = IntegerField('Limit', validators=[Optional()])
    specialty = StringField('Specialty', validators=[Optional()], filters=[_upper])

    def validate_lat(self, field):
        if field.data is not None and not math.isfinite(field.data):
            raise ValidationError('Latitude must be a finite number.')

    def validate_lng(self, field):
        if field.data is not None and not math.isfinite(field.data):
            raise ValidationError('Longitude must be a finite number.')

    def coordinates_valid(self):
        return not (self.lat.errors or self.lng.errors)

    def limit_or(self, default):
        # invalid or non-positive limits fall back to the default
        if self.limit.errors or not self.limit.data or self.limit.data < 1:
            return default
        return self.limit.data

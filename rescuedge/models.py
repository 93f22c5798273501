from . import db


class Hospital(db.Model):
    id = db.Column(db.Integer, primary_key=True)
    hospital_id = db.Column(db.String(64), unique=True, nullable=False)
    name = db.Column(db.String(140), nullable=False)
    lat = db.Column(db.Float, nullable=False)
    lng = db.Column(db.Float, nullable=False)
    phone = db.Column(db.String(32))
    # e.g. TRAUMA, BURN, CARDIAC, NEURO, GENERAL
    specialties = db.Column(db.JSON, default=list)
    beds_available = db.Column(db.Integer, default=0, nullable=False)
    emergency_capable = db.Column(db.Boolean, default=True, nullable=False)
    # whether the hospital is accepting patients
    active = db.Column(db.Boolean, default=True, nullable=False)

    def __repr__(self):
        return f'<Hospital {self.hospital_id} {self.name}>'

    def has_specialty(self, specialty):
        return specialty in (self.specialties or [])

    def serialize(self):
        return {
            'hospitalId': self.hospital_id,
            'name': self.name,
            'location': {'lat': self.lat, 'lng': self.lng},
            'phone': self.phone,
            'specialties': list(self.specialties or []),
            'bedsAvailable': self.beds_available,
            'emergencyCapable': self.emergency_capable,
            'active': self.active,
        }

"""Hospital registry.

Tracks hospitals with their locations, specialties and bed availability, and
answers "which emergency-capable hospital is closest" for a scene location.
"""
import logging
import math

from sqlalchemy.exc import IntegrityError

from . import db
from .geo import haversine_km
from .models import Hospital

logger = logging.getLogger(__name__)

# Hospitals around Pune, India used for demos and local development
DEMO_HOSPITALS = [
    {
        'hospital_id': 'HOSP-RUBY',
        'name': 'Ruby Hall Clinic',
        'lat': 18.5308, 'lng': 73.8774,
        'phone': '+912026163391',
        'specialties': ['TRAUMA', 'CARDIAC', 'GENERAL'],
        'beds_available': 12,
    },
    {
        'hospital_id': 'HOSP-KEM',
        'name': 'KEM Hospital Pune',
        'lat': 18.5018, 'lng': 73.8636,
        'phone': '+912026126000',
        'specialties': ['TRAUMA', 'BURN', 'GENERAL'],
        'beds_available': 8,
    },
    {
        'hospital_id': 'HOSP-SAHYADRI',
        'name': 'Sahyadri Hospital Deccan',
        'lat': 18.5128, 'lng': 73.8412,
        'phone': '+912067215000',
        'specialties': ['TRAUMA', 'CARDIAC', 'NEURO', 'GENERAL'],
        'beds_available': 15,
    },
    {
        'hospital_id': 'HOSP-JEHANGIR',
        'name': 'Jehangir Hospital',
        'lat': 18.5310, 'lng': 73.8760,
        'phone': '+912026053600',
        'specialties': ['TRAUMA', 'CARDIAC', 'GENERAL'],
        'beds_available': 10,
    },
    {
        'hospital_id': 'HOSP-SASSOON',
        'name': 'Sassoon General Hospital',
        'lat': 18.5165, 'lng': 73.8721,
        'phone': '+912026128000',
        'specialties': ['TRAUMA', 'BURN', 'GENERAL'],
        'beds_available': 20,
    },
    {
        'hospital_id': 'HOSP-ADITYA-BIRLA',
        'name': 'Aditya Birla Memorial Hospital',
        'lat': 18.6298, 'lng': 73.7997,
        'phone': '+912030717171',
        'specialties': ['TRAUMA', 'CARDIAC', 'NEURO', 'GENERAL'],
        'beds_available': 18,
    },
]


def _is_coordinate(value):
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def find_nearest_hospitals(lat, lng, specialty=None, min_beds=1, limit=1):
    """Return up to ``limit`` (hospital, distance_km) pairs closest to lat/lng.

    Only active, emergency-capable hospitals with at least ``min_beds`` free
    beds (and the given specialty, when one is asked for) are considered.
    """
    if not (_is_coordinate(lat) and _is_coordinate(lng)):
        return []

    candidates = Hospital.query.filter(
        Hospital.active == True,
        Hospital.emergency_capable == True,
        Hospital.beds_available >= min_beds,
    ).all()
    if specialty:
        candidates = [h for h in candidates if h.has_specialty(specialty)]

    ranked = sorted(
        ((h, haversine_km(lat, lng, h.lat, h.lng)) for h in candidates),
        key=lambda pair: pair[1],
    )
    return ranked[:max(limit, 0)]


def get_hospital(hospital_id):
    return Hospital.query.filter_by(hospital_id=hospital_id).first()


def get_all_hospitals():
    return Hospital.query.order_by(Hospital.id.asc()).all()


REPLACEABLE_FIELDS = ('name', 'lat', 'lng', 'phone', 'specialties',
                      'beds_available', 'emergency_capable', 'active')

# column defaults only apply on INSERT, so a replacement fills them in itself
FIELD_DEFAULTS = {
    'specialties': list,
    'beds_available': lambda: 0,
    'emergency_capable': lambda: True,
    'active': lambda: True,
}


def register_hospital(hospital):
    """Add a hospital, replacing any record with the same hospital_id."""
    existing = get_hospital(hospital.hospital_id)
    if existing is not None:
        for field in REPLACEABLE_FIELDS:
            value = getattr(hospital, field)
            if value is None and field in FIELD_DEFAULTS:
                value = FIELD_DEFAULTS[field]()
            setattr(existing, field, value)
        hospital = existing
    else:
        db.session.add(hospital)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        raise
    logger.info("Registered hospital %s (%s)", hospital.hospital_id, hospital.name)
    return hospital


def update_hospital_beds(hospital_id, beds_available):
    hospital = get_hospital(hospital_id)
    if hospital is None:
        return None
    hospital.beds_available = beds_available
    db.session.commit()
    logger.info("Hospital %s now has %s beds available", hospital_id, beds_available)
    return hospital


def set_hospital_active(hospital_id, active):
    hospital = get_hospital(hospital_id)
    if hospital is None:
        return None
    hospital.active = active
    db.session.commit()
    logger.info("Hospital %s marked %s", hospital_id, 'active' if active else 'inactive')
    return hospital


def seed_demo_hospitals():
    """Insert the demo hospitals that are not registered yet. Returns the count added."""
    added = 0
    for record in DEMO_HOSPITALS:
        if get_hospital(record['hospital_id']) is not None:
            continue
        fields = dict(record, specialties=list(record['specialties']))
        db.session.add(Hospital(emergency_capable=True, active=True, **fields))
        added += 1
    db.session.commit()
    logger.info("Seeded %d demo hospitals", added)
    return added

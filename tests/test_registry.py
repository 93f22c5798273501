"""Hospital registry tests"""

import pytest
from sqlalchemy.exc import IntegrityError

from rescuedge import db
from rescuedge.models import Hospital
from rescuedge.registry import (DEMO_HOSPITALS, find_nearest_hospitals, get_all_hospitals,
                                get_hospital, register_hospital, seed_demo_hospitals,
                                set_hospital_active, update_hospital_beds)

# central Pune
CITY_LAT = 18.5204
CITY_LNG = 73.8567


def make_hospital(hospital_id='HOSP-TEST', **overrides):
    fields = dict(hospital_id=hospital_id, name='Test Hospital', lat=18.52, lng=73.85,
                  phone='+910000000000', specialties=['GENERAL'], beds_available=5,
                  emergency_capable=True, active=True)
    fields.update(overrides)
    return Hospital(**fields)


def ids(ranked):
    return [h.hospital_id for h, _ in ranked]


def test_demo_hospitals_seeded_in_order(app):
    assert [h.hospital_id for h in get_all_hospitals()] == [r['hospital_id'] for r in DEMO_HOSPITALS]


def test_seeding_is_idempotent(app):
    assert seed_demo_hospitals() == 0
    assert len(get_all_hospitals()) == 6


def test_seed_into_empty_registry(empty_app):
    assert get_all_hospitals() == []
    assert seed_demo_hospitals() == 6


def test_get_hospital(app):
    hospital = get_hospital('HOSP-KEM')
    assert hospital.name == 'KEM Hospital Pune'
    assert hospital.has_specialty('BURN')
    assert get_hospital('HOSP-NOPE') is None


def test_serialize_uses_wire_names(app):
    assert get_hospital('HOSP-RUBY').serialize() == {
        'hospitalId': 'HOSP-RUBY',
        'name': 'Ruby Hall Clinic',
        'location': {'lat': 18.5308, 'lng': 73.8774},
        'phone': '+912026163391',
        'specialties': ['TRAUMA', 'CARDIAC', 'GENERAL'],
        'bedsAvailable': 12,
        'emergencyCapable': True,
        'active': True,
    }


def test_nearest_defaults_to_single_result(app):
    ranked = find_nearest_hospitals(18.5165, 73.8721)
    assert ids(ranked) == ['HOSP-SASSOON']
    assert ranked[0][1] == pytest.approx(0.0)


def test_nearest_sorted_by_distance(app):
    ranked = find_nearest_hospitals(CITY_LAT, CITY_LNG, limit=10)
    distances = [d for _, d in ranked]
    assert distances == sorted(distances)
    assert ids(ranked)[:3] == ['HOSP-SASSOON', 'HOSP-SAHYADRI', 'HOSP-KEM']
    assert ids(ranked)[-1] == 'HOSP-ADITYA-BIRLA'


def test_nearest_filters_by_specialty(app):
    assert ids(find_nearest_hospitals(CITY_LAT, CITY_LNG, specialty='BURN', limit=5)) == ['HOSP-SASSOON', 'HOSP-KEM']
    assert sorted(ids(find_nearest_hospitals(CITY_LAT, CITY_LNG, specialty='NEURO', limit=5))) == [
        'HOSP-ADITYA-BIRLA', 'HOSP-SAHYADRI']
    assert find_nearest_hospitals(CITY_LAT, CITY_LNG, specialty='PAEDIATRIC') == []


def test_nearest_skips_unavailable_hospitals(app):
    set_hospital_active('HOSP-SASSOON', False)
    update_hospital_beds('HOSP-SAHYADRI', 0)
    register_hospital(make_hospital('HOSP-CLINIC', lat=CITY_LAT, lng=CITY_LNG, emergency_capable=False))

    assert ids(find_nearest_hospitals(CITY_LAT, CITY_LNG)) == ['HOSP-KEM']


def test_nearest_respects_min_beds(app):
    ranked = find_nearest_hospitals(CITY_LAT, CITY_LNG, min_beds=16, limit=10)
    assert sorted(ids(ranked)) == ['HOSP-ADITYA-BIRLA', 'HOSP-SASSOON']


@pytest.mark.parametrize('lat,lng', [(float('nan'), 73.8), (18.5, float('inf')), (None, 73.8), ('18.5', 73.8)])
def test_nearest_with_invalid_location_is_empty(app, lat, lng):
    assert find_nearest_hospitals(lat, lng) == []


def test_register_adds_new_hospital(empty_app):
    register_hospital(make_hospital())
    assert [h.hospital_id for h in get_all_hospitals()] == ['HOSP-TEST']


def test_register_replaces_existing_record(app):
    register_hospital(make_hospital('HOSP-KEM', name='KEM Annex', beds_available=2, specialties=['GENERAL']))

    hospital = get_hospital('HOSP-KEM')
    assert hospital.name == 'KEM Annex'
    assert hospital.beds_available == 2
    assert hospital.specialties == ['GENERAL']
    assert Hospital.query.filter_by(hospital_id='HOSP-KEM').count() == 1


def test_replace_fills_in_omitted_fields(app):
    set_hospital_active('HOSP-KEM', False)
    register_hospital(Hospital(hospital_id='HOSP-KEM', name='KEM Annex', lat=18.5, lng=73.8,
                               phone='+91', specialties=['GENERAL'], beds_available=2))
    db.session.expire_all()

    hospital = get_hospital('HOSP-KEM')
    assert hospital.name == 'KEM Annex'
    assert hospital.emergency_capable is True
    assert hospital.active is True
    assert Hospital.query.filter_by(hospital_id='HOSP-KEM').count() == 1


def test_replace_can_run_twice(empty_app):
    for _ in range(2):
        register_hospital(Hospital(hospital_id='HOSP-TWICE', name='Twice Hospital', lat=18.52, lng=73.85,
                                   phone='+910000000000', specialties=['GENERAL'], beds_available=1))
    assert [h.hospital_id for h in get_all_hospitals()] == ['HOSP-TWICE']


def test_failed_replace_rolls_back(app):
    with pytest.raises(IntegrityError):
        register_hospital(make_hospital('HOSP-KEM', name=None))

    assert get_hospital('HOSP-KEM').name == 'KEM Hospital Pune'


def test_update_beds_and_status(app):
    update_hospital_beds('HOSP-RUBY', 3)
    set_hospital_active('HOSP-RUBY', False)
    db.session.expire_all()

    hospital = get_hospital('HOSP-RUBY')
    assert hospital.beds_available == 3
    assert hospital.active is False


def test_updates_ignore_unknown_hospital(app):
    assert update_hospital_beds('HOSP-NOPE', 3) is None
    assert set_hospital_active('HOSP-NOPE', False) is None
    assert get_hospital('HOSP-NOPE') is None

import logging
import math
import uuid
from datetime import datetime, timezone

from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import HTTPException

from .exceptions import NotFoundError, RequestValidationError, RescuEdgeError
from .forms import NearestHospitalForm
from .geo import google_maps_link
from .registry import (find_nearest_hospitals, get_all_hospitals, get_hospital,
                       set_hospital_active, update_hospital_beds)

DEFAULT_NEAREST_LIMIT = 3

logger = logging.getLogger(__name__)

hospitals_bp = Blueprint('hospitals', __name__, url_prefix='/api/corridor')


def response_meta():
    """Envelope metadata attached to list responses."""
    return {
        'requestId': f'REQ-{uuid.uuid4()}',
        'timestamp': datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z'),
        'env': current_app.config.get('APP_ENV', 'development'),
        'version': current_app.config.get('API_VERSION', '1.0'),
    }


def with_map_link(hospital, **extra):
    row = hospital.serialize()
    row.update(extra)
    row['mapLink'] = google_maps_link(hospital.lat, hospital.lng)
    return row


def _json_body():
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _require_hospital(hospital_id):
    hospital = get_hospital(hospital_id)
    if hospital is None:
        raise NotFoundError('Hospital not found', {'hospitalId': hospital_id})
    return hospital


@hospitals_bp.errorhandler(RescuEdgeError)
def handle_rescuedge_error(error):
    if error.status_code >= 500:
        logger.error("Request to %s failed: %s", request.path, error.message)
    return jsonify({'error': error.message}), error.status_code


@hospitals_bp.app_errorhandler(HTTPException)
def handle_http_error(error):
    """Render framework errors (unknown route, wrong method, ...) under /api/corridor as JSON."""
    prefix = hospitals_bp.url_prefix
    if request.path != prefix and not request.path.startswith(prefix + '/'):
        return error
    return jsonify({'error': error.description}), error.code


@hospitals_bp.route('/hospitals')
def list_hospitals():
    hospitals = [h.serialize() for h in get_all_hospitals()]
    return jsonify({
        'meta': response_meta(),
        'payload': {'hospitals': hospitals, 'total': len(hospitals)},
    })


@hospitals_bp.route('/hospitals/nearest')
def nearest_hospitals():
    """Find the closest emergency-capable hospitals to lat/lng.

    Query params: lat, lng (required), limit (optional, default 3), specialty (optional)
    """
    form = NearestHospitalForm(request.args)
    form.validate()
    if not form.coordinates_valid():
        raise RequestValidationError('lat and lng query parameters required (numbers)')

    ranked = find_nearest_hospitals(
        form.lat.data,
        form.lng.data,
        specialty=form.specialty.data or None,
        limit=form.limit_or(DEFAULT_NEAREST_LIMIT),
    )
    hospitals = [with_map_link(h, distanceKm=distance) for h, distance in ranked]
    return jsonify({'payload': {'hospitals': hospitals, 'total': len(hospitals)}})


@hospitals_bp.route('/hospitals/<string:hospital_id>')
def hospital_detail(hospital_id):
    hospital = _require_hospital(hospital_id)
    return jsonify({'payload': with_map_link(hospital)})


@hospitals_bp.route('/hospitals/<string:hospital_id>/beds', methods=['PATCH'])
def update_beds(hospital_id):
    beds = _json_body().get('bedsAvailable')
    valid = (isinstance(beds, (int, float)) and not isinstance(beds, bool)
             and math.isfinite(beds) and beds >= 0 and float(beds).is_integer())
    if not valid:
        raise RequestValidationError('bedsAvailable (non-negative number) required')
    _require_hospital(hospital_id)
    beds = int(beds)
    update_hospital_beds(hospital_id, beds)
    return jsonify({'payload': {'hospitalId': hospital_id, 'bedsAvailable': beds}})


@hospitals_bp.route('/hospitals/<string:hospital_id>/status', methods=['PATCH'])
def update_status(hospital_id):
    active = _json_body().get('active')
    if not isinstance(active, bool):
        raise RequestValidationError('active (boolean) required')
    _require_hospital(hospital_id)
    set_hospital_active(hospital_id, active)
    return jsonify({'payload': {'hospitalId': hospital_id, 'active': active}})

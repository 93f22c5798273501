"""Emergency SMS alerts sent through the Twilio REST API."""
import logging
import os

import requests

from .exceptions import AlertDeliveryError, ConfigurationError
from .geo import google_maps_link

TWILIO_MESSAGES_URL = "https://api.twilio.com/2010-04-01/Accounts/{sid}/Messages.json"

logger = logging.getLogger(__name__)


def build_alert_body(lat, lng):
    return f"🚨 EMERGENCY ALERT!\n\nLocation: {google_maps_link(lat, lng)}\n\nImmediate assistance required."


def send_emergency_sms(to, lat, lng, account_sid=None, auth_token=None, from_number=None, timeout=10):
    """Send an emergency alert with a map link for lat/lng to ``to``.

    Credentials default to TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and
    TWILIO_PHONE_NUMBER from the environment.

    Returns a dict with the message sid, status, from, to and mapLink.
    Raises ConfigurationError when credentials are missing and
    AlertDeliveryError when Twilio rejects or cannot be reached.
    """
    account_sid = account_sid or os.environ.get('TWILIO_ACCOUNT_SID')
    auth_token = auth_token or os.environ.get('TWILIO_AUTH_TOKEN')
    from_number = from_number or os.environ.get('TWILIO_PHONE_NUMBER')
    if not account_sid or not auth_token or not from_number:
        raise ConfigurationError('Missing Twilio credentials (TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN, TWILIO_PHONE_NUMBER)')

    map_link = google_maps_link(lat, lng)
    url = TWILIO_MESSAGES_URL.format(sid=account_sid)
    body = {"To": to, "From": from_number, "Body": build_alert_body(lat, lng)}
    logger.info("Sending emergency SMS to %s", to)
    try:
        r = requests.post(url, data=body, auth=(account_sid, auth_token), timeout=timeout)
        r.raise_for_status()
        data = r.json()
    except requests.RequestException as e:
        logger.error("Emergency SMS to %s failed: %s", to, e)
        raise AlertDeliveryError(f'Failed to send SMS: {e}', {'to': to}) from e

    logger.info("Emergency SMS %s queued with status %s", data.get('sid'), data.get('status'))
    return {
        'sid': data.get('sid'),
        'status': data.get('status'),
        'from': data.get('from', from_number),
        'to': data.get('to', to),
        'mapLink': map_link,
    }

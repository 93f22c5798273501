#!/usr/bin/env python3
"""Send a test emergency SMS through Twilio.

Usage:
  python scripts/send_test_sms.py --to +15551234567 [--lat 19.0760 --lng 72.8777]

Reads TWILIO_ACCOUNT_SID, TWILIO_AUTH_TOKEN and TWILIO_PHONE_NUMBER from the environment.
"""
import argparse
import sys

from rescuedge.alerts import send_emergency_sms
from rescuedge.exceptions import RescuEdgeError

# Mumbai, used when no location is given
DEFAULT_LAT = 19.0760
DEFAULT_LNG = 72.8777


def main(argv=None):
    parser = argparse.ArgumentParser(description='Send a test emergency SMS')
    parser.add_argument('--to', required=True, help='Destination phone number (E.164)')
    parser.add_argument('--lat', type=float, default=DEFAULT_LAT)
    parser.add_argument('--lng', type=float, default=DEFAULT_LNG)
    args = parser.parse_args(argv)

    print('Sending test SMS...')
    try:
        message = send_emergency_sms(args.to, args.lat, args.lng)
    except RescuEdgeError as e:
        print('Failed to send SMS:', e.message)
        return 1

    print('SMS sent successfully!')
    print(f"   Message SID: {message['sid']}")
    print(f"   Status: {message['status']}")
    print(f"   From: {message['from']}")
    print(f"   To: {message['to']}")
    print(f"   Map Link: {message['mapLink']}")
    return 0


if __name__ == '__main__':
    sys.exit(main())

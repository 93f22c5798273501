from math import radians, cos, sin, atan2, sqrt

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1, lon1, lat2, lon2):
    """Return distance between two lat/lon points in kilometres."""
    if None in (lat1, lon1, lat2, lon2):
        return None
    dlat = radians(lat2 - lat1)
    dlon = radians(lon2 - lon1)
    a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
    return 2 * EARTH_RADIUS_KM * atan2(sqrt(a), sqrt(1 - a))


def google_maps_link(lat, lng):
    """Build a Google Maps URL that drops a pin at lat,lng."""
    return f"https://www.google.com/maps?q={lat},{lng}"


def google_maps_navigation_url(lat, lng):
    """Build a Google Maps directions URL with lat,lng as the destination.

    The origin is left out so Google Maps uses the device's current location.
    """
    return f"https://www.google.com/maps/dir/?api=1&destination={lat},{lng}"

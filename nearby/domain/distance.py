"""
Distance calculation using the Haversine formula.

Great-circle distance on a sphere of radius 6371 km.  Degrees are converted
inline with ``* pi / 180`` and the squares are written as products, so the
floating-point path matches stored fixtures to the last digit.  Do not
"simplify" to ``math.radians`` or ``** 2``.

Complexity: O(1) per call.
"""

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **km** between two points."""
    dlat = (lat2 - lat1) * math.pi / 180.0
    dlng = (lng2 - lng1) * math.pi / 180.0

    a = (
        math.sin(dlat / 2) * math.sin(dlat / 2)
        + math.cos(lat1 * math.pi / 180.0)
        * math.cos(lat2 * math.pi / 180.0)
        * math.sin(dlng / 2)
        * math.sin(dlng / 2)
    )
    # Rounding can push a past 1 near antipodes; out-of-range input can push it below 0.
    a = min(max(a, 0.0), 1.0)
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c

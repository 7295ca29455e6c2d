"""
Distance calculation using the Haversine formula.

Assumption
----------
Distances are straight-line great-circle distances between meeting points,
not running-route distances.  The Earth is modelled as a sphere with the
mean radius expressed in statute miles, which is accurate to well under
1 % for the short "how far is this run from me" distances the seeker view
works with.

Complexity: O(1) per call.
"""

import math

EARTH_RADIUS_MILES = 3_958.8


def haversine_miles(
    lat1: float, lng1: float, lat2: float, lng2: float
) -> float:
    """Return the great-circle distance in **miles** between two points."""
    lat1_r, lat2_r = math.radians(lat1), math.radians(lat2)
    dlat = math.radians(lat2 - lat1)
    dlng = math.radians(lng2 - lng1)

    a = (
        math.sin(dlat / 2) ** 2
        + math.cos(lat1_r) * math.cos(lat2_r) * math.sin(dlng / 2) ** 2
    )
    # atan2 keeps the result defined when rounding pushes ``a`` to exactly 1
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_MILES * c

"""Constants shared by the orbital model and its collaborators.

Planetary values follow Singal, T. & Singal, A. (2009), "Determining planetary
positions in the sky for ~50 years to an accuracy of 1 degree with a
calculator".
"""

from datetime import datetime

import pytz

# Days lapsed before the Earth completes one orbit
YRS = 365.256

DEGREES_PER_CIRCLE = 360.0

# IAU 2012 definition of the astronomical unit
KM_PER_AU = 149597870.7

# Instant the catalog's mean longitudes refer to
REFERENCE_EPOCH = datetime(2000, 1, 1, 0, 0, 0, tzinfo=pytz.UTC)

"""Physical and angular constants of the spherical Earth model."""

from math import pi

from spherenav.unit import Meter, Radian, Ratio

# WGS84 equatorial radius, used as the radius of a perfect sphere
EARTH_RADIUS = Meter(6_378_137.0)

ZERO_ANGLE = Radian(0.0)
QUARTER_TURN = Radian(pi / 2)
HALF_TURN = Radian(pi)
FULL_TURN = Radian(2 * pi)

FULL_RATIO = Ratio(1.0)

# Latitude of the south pole
MIN_LAT = Radian(-pi / 2)
# Latitude of the north pole
MAX_LAT = Radian(pi / 2)
# Antimeridian, approached from the west; same place as MAX_LONG
MIN_LONG = Radian(-pi)
# Antimeridian, approached from the east
MAX_LONG = Radian(pi)

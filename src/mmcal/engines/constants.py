"""
mmcal.engines.constants
-----------------------
Astronomical constants of the Myanmar calendar (Thandeikta system).
"""

# Solar year: 1577917828 days in a mahayuga of 4320000 years (365.2587565)
SOLAR_YEAR = 1577917828.0 / 4320000.0

# Synodic month: the same span over 53433336 lunations (29.53058795)
LUNAR_MONTH = 1577917828.0 / 53433336.0

# JD of the beginning of ME 0 (Myanmar time)
MYANMAR_EPOCH = 1954168.050623

# A common year has 12 alternating months of 29 and 30 days
COMMON_YEAR_DAYS = 354

# Days from the full moon of (2nd) Waso back to the 1st waxing of Tagu
TAGU1_OFFSET = 102

# Mean-month fit used to split a day count into months:
# month m starts after floor(29.544 * m - 29.26) days
MONTH_SLOPE = 29.544
MONTH_INTERCEPT = 29.26

# First year of the third era (after Independence)
THIRD_ERA_START = 1312

# First year for which Thingyan holidays are reported
THINGYAN_START = 1100

"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from datetime import time

# Club meets on Wednesdays (date.weekday() == 2).
CLUB_WEEKDAY = 2

DEFAULT_SESSION_START = time(15, 30)
DEFAULT_SESSION_END = time(16, 0)

MIN_GRADE = 2
MAX_GRADE = 6
GRADES = tuple(range(MIN_GRADE, MAX_GRADE + 1))

DEFAULT_RECENT_MATCHES = 10

FIVE_POINT_CLUB_POINTS = 5
CHAMPION_POINTS = 10
SOCIAL_PLAYER_OPPONENTS = 3

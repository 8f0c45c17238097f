"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_BREAK_MINUTES = 60
DEFAULT_PENALTY_ROUNDING_MINUTES = 30
DEFAULT_REMIND_MINUTES = 15

MAX_SHIFT_NAME_LENGTH = 200
MIN_DEPARTURE_LEAD_MINUTES = 5
MIN_OFFICE_HOURS = 2
MIN_OVERTIME_MINUTES = 30

MINUTES_PER_DAY = 24 * 60

MAX_NOTE_TITLE_LENGTH = 100
MAX_NOTE_CONTENT_LENGTH = 300
UPCOMING_NOTES_LIMIT = 3

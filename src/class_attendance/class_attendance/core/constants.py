"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

DEFAULT_ATTENDANCE_THRESHOLD = 75
MAX_UPLOAD_MB = 5

WEEKDAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")
SCHOOL_DAYS = WEEKDAY_NAMES[:5]

# Weekday abbreviations printed by the timetable generator, in weekday order.
WEEKDAY_MARKERS = {
    "Mo": "Monday",
    "Tu": "Tuesday",
    "We": "Wednesday",
    "Th": "Thursday",
    "Fr": "Friday",
}
TERMINAL_MARKER = "Timetable generated"

LAB_MARKER = "Lab"
DEFAULT_SUBJECT_TOKENS = ("DA Lab", "DSA Lab", "IoT Lab", "DA", "OS", "IoT", "Stats", "DSA", "Discrete m")
# Trailing qualifiers some generators append to a subject name.
SUBJECT_QUALIFIERS = (" m",)

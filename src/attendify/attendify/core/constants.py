"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

STORAGE_KEY = "attendance-data"

SAFE_ATTENDANCE_PERCENTAGE = 75.0

DEFAULT_REMINDER_OFFSET_MINUTES = 15

# Display colours handed out to new subjects, in cycling order.
COLOR_PALETTE = (
    "#6366f1",  # indigo
    "#a855f7",  # purple
    "#ec4899",  # pink
    "#f97316",  # orange
    "#22c55e",  # green
    "#14b8a6",  # teal
    "#3b82f6",  # blue
    "#84cc16",  # lime
)

MONTH_ABBREVIATIONS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

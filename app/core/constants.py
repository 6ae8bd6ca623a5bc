"""Application constants."""

# Workout builder limits
MAX_EXERCISES_PER_WORKOUT = 20

# Dashboard
RECENT_WORKOUTS_LIMIT = 5

# Sleep quality scale (inclusive)
SLEEP_QUALITY_MIN = 1
SLEEP_QUALITY_MAX = 5

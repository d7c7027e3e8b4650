"""Application constants."""

# Exercise catalog
EXERCISE_NAME_MAX_LENGTH = 255

# Workouts
WORKOUT_TITLE_MAX_LENGTH = 255

# Sets: weight is stored as NUMERIC(6, 2)
SET_WEIGHT_MAX_DIGITS = 6
SET_WEIGHT_DECIMAL_PLACES = 2

# First value of the per-parent order / set_number sequences
FIRST_SEQUENCE_VALUE = 1

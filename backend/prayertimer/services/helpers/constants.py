# prayertimer/services/helpers/constants.py

# Jumuah replaces Dhuhr on this weekday (datetime.weekday(): Monday is 0).
JUMUAH_WEEKDAY = 4

# --- Timer Boundary Constants ---
# Absorb clock-tick jitter so the timer mode does not flicker at exact boundaries.
TIMER_START_BUFFER_SECONDS = 2
TIMER_END_BUFFER_SECONDS = 10

# The running-low threshold never drops below a quarter of the prayer window.
DANGER_THRESHOLD_FLOOR = 0.25

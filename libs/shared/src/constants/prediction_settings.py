"""Prediction Store Settings"""

COPY_NAME_SUFFIX = " (副本)"  # Appended to the name of a duplicated prediction
RECENT_WINDOW_DAYS = 7  # stats().recent counts predictions created in this window

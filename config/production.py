import os

DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en-US")
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "")

DEBUG = False

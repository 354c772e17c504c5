import os

# Locale used when the client does not ask for one (e.g. 'en-US', 'ar-EG')
DEFAULT_LOCALE = os.getenv("DEFAULT_LOCALE", "en-US")

# IANA zone used to display UTC timestamps; empty means the server's local zone
DISPLAY_TIMEZONE = os.getenv("DISPLAY_TIMEZONE", "")

DEBUG = True

DEFAULT_LOCALE = "en-US"

# Fixed zone so tests do not depend on the machine's local time
DISPLAY_TIMEZONE = "UTC"

DEBUG = False
TESTING = True

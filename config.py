"""
config.py — App Configuration
==============================
Defaults for the Flask app.  Every key can be overridden with an
ALGOVIZ_-prefixed environment variable (values are parsed as JSON when
possible, so ALGOVIZ_DEFAULT_SPEED=4 arrives as an int) or with the
`overrides` dict passed to `create_app`.
"""

import secrets


class DefaultConfig:
    SECRET_KEY           = secrets.token_hex(32)
    DEFAULT_LOCALE       = "en"     # used when a request names no locale
    DEFAULT_SPEED        = 3        # speed level for new sessions, 1-5
    LOG_LEVEL            = "INFO"
    SESSION_IDLE_SECONDS = 1800     # drop a session after this long without requests


"""Constants for the Navitia API adapter.

API Documentation: https://doc.navitia.io/
Authentication: the API key is sent as the user name of HTTP basic auth.
"""

DEFAULT_HEADERS = {
    "Accept": "application/json",
}

# Query defaults
PLACES_RESULT_COUNT = 8
DATA_FRESHNESS = "realtime"

# Truncation of upstream error bodies in logs and error messages
ERROR_BODY_MAX_CHARS = 300

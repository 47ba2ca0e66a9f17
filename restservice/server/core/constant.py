"""Server-wide constants."""

API_V1_STR = "/api/v1"

# Requests slower than this are logged at WARNING by the request middleware
SLOW_REQUEST_THRESHOLD_MS = 1000

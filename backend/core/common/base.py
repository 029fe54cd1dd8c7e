VERSION = "1.0.0"

# upstream events API path, relative to settings.api_url
EVENTS_NEAR_PATH = "/api/events/near"

# listing defaults (Raleigh, NC)
DEFAULT_LATITUDE = 35.7796
DEFAULT_LONGITUDE = -78.6382
DEFAULT_RADIUS = 50.0

FETCH_FAILED_MESSAGE = "Failed to load events. Please try again later."
UNEXPECTED_ERROR_MESSAGE = "Something unexpected happened. Please try again later."

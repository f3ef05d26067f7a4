# card_drawer/common/constants.py

import os

VERSION = "0.1.0"
USER_AGENT = f"card-drawer/{VERSION}"

# Remote deck API
#   DECK_API_URL=https://... to point at another deck-of-cards server
#   DECK_API_TIMEOUT=10 seconds per request
API_BASE_URL = os.getenv("DECK_API_URL", "https://deckofcardsapi.com/api").rstrip("/")
REQUEST_TIMEOUT = float(os.getenv("DECK_API_TIMEOUT", "10"))

# Endpoint paths (relative to API_BASE_URL)
PATH_NEW_DECK = "/deck/new/shuffle/"
PATH_DRAW = "/deck/{deck_id}/draw/"
PATH_SHUFFLE = "/deck/{deck_id}/shuffle/"

DECK_COUNT = 1
DRAW_COUNT = 1

# Timers (seconds)
DRAW_INTERVAL_SEC = 1.0
ERROR_DISPLAY_SEC = 3.0

# Shuffle speed preference (ms). Stored and toggled, never applied to a timer.
SHUFFLE_SPEED_NORMAL = 1000
SHUFFLE_SPEED_FAST = 500

# User-facing error messages
MSG_FETCH_FAILED = "Failed to fetch deck."
MSG_NO_CARDS_REMAINING = "Error: no cards remaining!"
MSG_INVALID_RESPONSE = "Error: Invalid API response."
MSG_NO_CARDS_AVAILABLE = "Error: No cards available."
MSG_DRAW_FAILED = "Failed to draw card."
MSG_SHUFFLE_FAILED = "Failed to shuffle deck."

TITLE = "Card Drawer"

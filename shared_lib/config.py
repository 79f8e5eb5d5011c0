import os

# --- Backend API Configuration ---
API_BASE_URL = os.getenv("API_BASE_URL", "http://localhost:5050")
API_JWT = os.getenv("API_JWT")
API_TIMEOUT_SECONDS = int(os.getenv("API_TIMEOUT_SECONDS", 10))

# --- Localization ---
# Dates in the schedule are interpreted in this timezone; unset means the host's local zone.
APP_TIMEZONE = os.getenv("APP_TIMEZONE")
DEFAULT_LANG = "ru"

import os

API_URL = os.getenv("API_URL", "http://localhost:8000")

APP_NAME = "Holdings Tracker"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

REQUEST_TIMEOUT_SECONDS = 30

# User-facing error strings. Each replaces whatever error a view showed before.
ERROR_LOAD_DATA = "Failed to load your accounts"
ERROR_CREATE_ACCOUNT = "Failed to create account"
ERROR_ACCOUNT_NAME_REQUIRED = "Account name is required"
ERROR_LOAD_HOLDINGS = "Failed to load holdings"
ERROR_ADD_HOLDING = "Failed to add holding"
ERROR_MARK_HOLDING = "Failed to mark holding"
ERROR_LOGOUT = "Failed to log out"

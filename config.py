# config.py

# --- TIME ---

# Timezone for the status comparisons
# (UTC is recommended for server operations)
TIMEZONE = "UTC"


# --- LOGGING ---

# Overridden by the LAST_EVENT_STATUS_LOG_LEVEL environment variable.
LOG_LEVEL = "INFO"
# Read by logging_config.setup_logging; None logs to the console only.
LOG_FILE = None

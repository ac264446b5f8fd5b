"""Service configuration constants.

The service has no environment or command-line configuration surface;
change these values and redeploy.
"""
import logging

SERVICE_NAME = "Descriptive Statistics Service"
SERVICE_VERSION = "1.0.0"

HOST = "0.0.0.0"
PORT = 3001

LOG_LEVEL = logging.INFO

# When set, every computed result is appended to this file instead of the log.
RECORD_FILE: str | None = None

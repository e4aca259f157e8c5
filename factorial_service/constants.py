"""
Factorial Service Global Constants

Centralized location for all system-wide constants used across the application.
"""

# HTTP response contract
CACHE_STATUS_HEADER = "X-Cache-Status"
INPUT_TOO_BIG_MESSAGE = "The input number is too big!"

# Application Constants
APP_NAME = "Factorial Service"
APP_VERSION = "0.1.0"

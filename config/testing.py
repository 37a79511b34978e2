import os

SECRET_KEY = "test-secret"

API_CONFIG = {
    "base_url": os.getenv("HRMS_API_BASE_URL", "http://hr-api.test"),
    "timeout": 1.0,
}

DEBUG = False
TESTING = True

LOG_LEVEL = "WARNING"

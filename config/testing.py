import os

SECRET_KEY = "test-secret"

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

QUOTA_COUNTS_PRESENT_ONLY = False
SEED_DEMO_DATA = False

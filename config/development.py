import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Weekly quota counts every existing mark unless this is enabled
QUOTA_COUNTS_PRESENT_ONLY = bool(int(os.getenv("QUOTA_COUNTS_PRESENT_ONLY", "0")))

# Register demo students and holidays on startup
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

QUOTA_COUNTS_PRESENT_ONLY = bool(int(os.getenv("QUOTA_COUNTS_PRESENT_ONLY", "0")))
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

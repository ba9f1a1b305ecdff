import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

API_PREFIX = os.getenv("API_PREFIX", "/api")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "0")))

SCHOOL_DELETE_POLICY = os.getenv("SCHOOL_DELETE_POLICY", "orphan")
ENFORCE_REFERENTIAL_INTEGRITY = bool(int(os.getenv("ENFORCE_REFERENTIAL_INTEGRITY", "1")))

import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

API_PREFIX = os.getenv("API_PREFIX", "/api")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Start with a small demo district (login: admin / admin123)
SEED_DEMO_DATA = bool(int(os.getenv("SEED_DEMO_DATA", "1")))

# orphan: deleting a school leaves its dependants in place; cascade: removes them
SCHOOL_DELETE_POLICY = os.getenv("SCHOOL_DELETE_POLICY", "orphan")
ENFORCE_REFERENTIAL_INTEGRITY = bool(int(os.getenv("ENFORCE_REFERENTIAL_INTEGRITY", "1")))

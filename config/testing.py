SECRET_KEY = "test-secret"

API_PREFIX = "/api"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

SEED_DEMO_DATA = False

SCHOOL_DELETE_POLICY = "orphan"
ENFORCE_REFERENTIAL_INTEGRITY = True

import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "uri": os.getenv("MONGO_URI", "mongodb://localhost:27017"),
    "database": os.getenv("MONGO_DB", "student_attendance_test"),
}

DEBUG = False
TESTING = True

API_PREFIX = "/api"
CORS_ORIGINS = "*"
LOG_LEVEL = "WARNING"
LOG_FILE = None

AUTO_INIT_DB = True
AUTO_SEED_DB = False
STRICT_STUDENT_REFERENCE = False
UNIQUE_DAILY_ATTENDANCE = False

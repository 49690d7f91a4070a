import os


def _flag(name: str, default: str = "0") -> bool:
    return bool(int(os.environ.get(name, default)))


class Config:
    SECRET_KEY = os.environ.get("SECRET_KEY") or "student-attendance-dev-key"

    # Mongo
    MONGO_URI = os.environ.get("MONGO_URI", "mongodb://localhost:27017")
    MONGO_DB = os.environ.get("MONGO_DB", "student_attendance")

    API_PREFIX = os.environ.get("API_PREFIX", "/api")
    CORS_ORIGINS = os.environ.get("CORS_ORIGINS", "*")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
    LOG_FILE = os.environ.get("LOG_FILE") or None

    # Dev helpers
    AUTO_INIT_DB = _flag("AUTO_INIT_DB", "1")
    AUTO_SEED_DB = _flag("AUTO_SEED_DB")

    # Attendance policies (off = permissive behavior)
    STRICT_STUDENT_REFERENCE = _flag("STRICT_STUDENT_REFERENCE")
    UNIQUE_DAILY_ATTENDANCE = _flag("UNIQUE_DAILY_ATTENDANCE")


# Flat names read by create_app()
SECRET_KEY = Config.SECRET_KEY
DB_CONFIG = {
    "uri": Config.MONGO_URI,
    "database": Config.MONGO_DB,
}

DEBUG = _flag("DEBUG", "1")

API_PREFIX = Config.API_PREFIX
CORS_ORIGINS = Config.CORS_ORIGINS
LOG_LEVEL = Config.LOG_LEVEL
LOG_FILE = Config.LOG_FILE

AUTO_INIT_DB = Config.AUTO_INIT_DB
AUTO_SEED_DB = Config.AUTO_SEED_DB
STRICT_STUDENT_REFERENCE = Config.STRICT_STUDENT_REFERENCE
UNIQUE_DAILY_ATTENDANCE = Config.UNIQUE_DAILY_ATTENDANCE

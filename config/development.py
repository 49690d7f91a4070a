import os

from config.config import *  # noqa: F401,F403

DEBUG = True
LOG_LEVEL = "DEBUG"

# Optional: also seed demo data on startup
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

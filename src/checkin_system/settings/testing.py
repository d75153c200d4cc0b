import os

from .base import *  # noqa: F401,F403

SECRET_KEY = "test-secret"

ADMIN_PASSWORD = "test-admin"

DEBUG = False
TESTING = True

AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "0")))
AUTO_SEED_DB = bool(int(os.getenv("AUTO_SEED_DB", "0")))

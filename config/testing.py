import os

from .config import db_config_from_env, logging_config

SECRET_KEY = "test-secret"

DB_CONFIG = db_config_from_env(default_password="payroll")

DEBUG = False
TESTING = True

AUTO_INIT_DB = False
AUTO_SEED_DB = False

LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
LOGGING_CONFIG = logging_config(LOG_LEVEL)

PAYROLL_WITHHOLD_TAX = False

import os

from .config import db_config_from_env, env_flag, logging_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = db_config_from_env(default_password="payroll")

DEBUG = True

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "1")
# Optional: also seed demo data on startup
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
LOGGING_CONFIG = logging_config(LOG_LEVEL)

# Withhold progressive income tax during generation (off: tax deduction stays 0).
PAYROLL_WITHHOLD_TAX = env_flag("PAYROLL_WITHHOLD_TAX", "0")

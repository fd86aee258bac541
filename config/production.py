import os

from .config import db_config_from_env, env_flag, logging_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

DB_CONFIG = db_config_from_env()

DEBUG = False

AUTO_INIT_DB = env_flag("AUTO_INIT_DB", "0")
AUTO_SEED_DB = env_flag("AUTO_SEED_DB", "0")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOGGING_CONFIG = logging_config(LOG_LEVEL)

PAYROLL_WITHHOLD_TAX = env_flag("PAYROLL_WITHHOLD_TAX", "0")

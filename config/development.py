import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "hr_dashboard"),
}

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# If enabled, app will apply schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

# Working days assumed for a month without attendance records
DEFAULT_WORKING_DAYS = int(os.getenv("DEFAULT_WORKING_DAYS", "22"))
ENFORCE_UNIQUE_SALARY_STRUCTURE = bool(int(os.getenv("ENFORCE_UNIQUE_SALARY_STRUCTURE", "0")))

import os

SECRET_KEY = "test-secret"

DB_CONFIG = {
    "host": os.getenv("DB_HOST", "localhost"),
    "port": int(os.getenv("DB_PORT", "3306")),
    "user": os.getenv("DB_USER", "root"),
    "password": os.getenv("DB_PASSWORD", ""),
    "database": os.getenv("DB_NAME", "clients_test_db"),
}

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"

UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads-test")
UPLOAD_URL_PREFIX = "/uploads"
MAX_CONTENT_LENGTH = 1024 * 1024

PAGE_SIZE = 5
PAGINATION_WINDOW = 5

AUTO_INIT_DB = False
AUTO_SEED_DB = False

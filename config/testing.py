from config.config import Config

SECRET_KEY = "test-secret"

# Tests never need a live MySQL server.
DB_BACKEND = "memory"
DB_CONFIG = Config.db_config()

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
CORS_ORIGINS = "*"

AUTO_INIT_DB = False
AUTO_SEED_DB = False

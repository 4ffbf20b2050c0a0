import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./registry.db")
    AUTO_CREATE_TABLES = bool(data.get("AUTO_CREATE_TABLES", True))
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_ACCESS_SECRET = data.get("JWT_ACCESS_SECRET", "dev-access-secret-change-in-production")
    JWT_REFRESH_SECRET = data.get("JWT_REFRESH_SECRET", "dev-refresh-secret-change-in-production")
    JWT_ACCESS_EXPIRES_MINUTES = int(data.get("JWT_ACCESS_EXPIRES_MINUTES", 15))
    JWT_REFRESH_EXPIRES_DAYS = int(data.get("JWT_REFRESH_EXPIRES_DAYS", 7))
    SESSION_TTL_DAYS = int(data.get("SESSION_TTL_DAYS", 7))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 10))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    SEED_ADMIN_EMAIL = data.get("SEED_ADMIN_EMAIL", "admin@example.com")
    SEED_ADMIN_PASSWORD = data.get("SEED_ADMIN_PASSWORD", "ChangeMe123!")
    SEED_ADMIN_NAME = data.get("SEED_ADMIN_NAME", "Registry Administrator")

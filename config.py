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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./mproject.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 50054)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    CREATE_SCHEMA = bool(data.get("CREATE_SCHEMA", True))
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_PUBLIC_KEY_FILE = data.get("JWT_PUBLIC_KEY_FILE", "")
    SERVER_VERSION = data.get("SERVER_VERSION", "v0.9.2")
    REORDER_ATOMIC = bool(data.get("REORDER_ATOMIC", True))

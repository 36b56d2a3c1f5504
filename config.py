import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./tenancy.db")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_EXPIRE_MINUTES = int(data.get("JWT_EXPIRE_MINUTES", 60))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    SEED_REFERENCE_DATA = bool(data.get("SEED_REFERENCE_DATA", 1))
    DEFAULT_ORGANIZATION = data.get(
        "DEFAULT_ORGANIZATION",
        {
            "name": "No Organization",
            "registration_number": "DEFAULT",
            "tax_number": "DEFAULT",
        },
    )
    SUBSCRIPTION_PLANS = data.get(
        "SUBSCRIPTION_PLANS",
        [
            {"name": "Free", "max_users": 2, "price": 0, "currency": "USD"},
            {"name": "Team", "max_users": 10, "price": 4900, "currency": "USD"},
            {"name": "Business", "max_users": 50, "price": 19900, "currency": "USD"},
        ],
    )
    # Principal promoted to Super-admin of the default organization on start-up
    SUPER_ADMIN_EMAIL = data.get("SUPER_ADMIN_EMAIL")
    SUPER_ADMIN_PASSWORD = data.get("SUPER_ADMIN_PASSWORD")

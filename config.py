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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./accounts.db")
    DB_ECHO = bool(data.get("DB_ECHO", False))
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Credentials
    PASSWORD_PEPPER = data.get("PASSWORD_PEPPER", "dev-pepper-change-in-production")
    HMAC_SECRET_KEY = data.get("HMAC_SECRET_KEY", "dev-hmac-key-change-in-production")
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
    PASSWORD_RESET_TTL_HOURS = int(data.get("PASSWORD_RESET_TTL_HOURS", 12))

    # Mail
    MAILGUN_DOMAIN = data.get("MAILGUN_DOMAIN", "mg.example.com")
    MAILGUN_API_KEY = data.get("MAILGUN_API_KEY", "")
    MAILGUN_API_BASE = data.get("MAILGUN_API_BASE", "https://api.eu.mailgun.net/v3")
    MAIL_SENDER = data.get("MAIL_SENDER", "Support <support@example.com>")
    MAIL_TIMEOUT_SECONDS = float(data.get("MAIL_TIMEOUT_SECONDS", 30))
    PASSWORD_RESET_URL = data.get("PASSWORD_RESET_URL", "http://localhost:3000/reset")

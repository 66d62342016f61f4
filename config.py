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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoices.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Identity is resolved upstream; the gateway forwards it in X-Owner-Id
    AUTH_DISABLED = bool(data.get("AUTH_DISABLED", False))
    DEFAULT_OWNER_ID = data.get("DEFAULT_OWNER_ID", "local-owner")

    # Invoicing
    INVOICE_NUMBER_PREFIX = data.get("INVOICE_NUMBER_PREFIX", "INV")
    CURRENCY_SYMBOL = data.get("CURRENCY_SYMBOL", "$")
    DEFAULT_PAGE_SIZE = data.get("DEFAULT_PAGE_SIZE", 10)
    TOP_CUSTOMERS_LIMIT = data.get("TOP_CUSTOMERS_LIMIT", 10)

    # Invoice delivery (mail relay webhook)
    NOTIFICATION_WEBHOOK_URL = data.get("NOTIFICATION_WEBHOOK_URL", None)
    NOTIFICATION_TIMEOUT_SECONDS = data.get("NOTIFICATION_TIMEOUT_SECONDS", 10.0)

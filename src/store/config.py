# runtime settings, overridable through the environment
import os

CATALOG_URL = os.getenv("STOREFRONT_CATALOG_URL", "https://fakestoreapi.com/products")
FETCH_TIMEOUT = float(os.getenv("STOREFRONT_FETCH_TIMEOUT", "10"))
NOTIFY_TIMEOUT = float(os.getenv("STOREFRONT_NOTIFY_TIMEOUT", "3"))
LOG_FILE = os.getenv("STOREFRONT_LOG_FILE")

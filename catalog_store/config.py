import os
from dotenv import load_dotenv

load_dotenv()

# Basic settings
DATA_DIR = os.path.abspath(os.getenv("DATA_DIR", "data"))
LOGS_DIR = os.path.join(DATA_DIR, "logs")
# Local key/value snapshot used by the cart side-channel
SNAPSHOT_PATH = os.getenv("SNAPSHOT_PATH", os.path.join(DATA_DIR, "snapshot.json"))

# Store configuration
# "demo" seeds sample products and articles, "empty" starts with no documents
SEED_MODE = os.getenv("SEED_MODE", "demo").lower()
SEED_MODES = ("demo", "empty")
# "uuid" or "timestamp" (millisecond timestamp plus counter)
ID_STRATEGY = os.getenv("ID_STRATEGY", "uuid").lower()
ID_STRATEGIES = ("uuid", "timestamp")

# Registered collections
PRODUCTS_COLLECTION = "products"
ARTICLES_COLLECTION = "articles"
ORDERS_COLLECTION = "orders"
COLLECTION_NAMES = (PRODUCTS_COLLECTION, ARTICLES_COLLECTION, ORDERS_COLLECTION)

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
LOG_TO_FILE = os.getenv("LOG_TO_FILE", "false").lower() == "true"
LOG_TO_CONSOLE = os.getenv("LOG_TO_CONSOLE", "true").lower() == "true"

"""Application configuration."""
import os
from pathlib import Path
from dotenv import load_dotenv

load_dotenv()

# Paths
BASE_DIR = Path(__file__).parent
DATA_DIR = Path(os.getenv("DATA_DIR", str(BASE_DIR / "data")))
DB_PATH = DATA_DIR / "catalog.db"
IMAGES_DIR = Path(os.getenv("IMAGES_DIR", str(DATA_DIR / "images")))

# Ensure directories exist
DATA_DIR.mkdir(parents=True, exist_ok=True)
IMAGES_DIR.mkdir(parents=True, exist_ok=True)

# Database (record store)
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{DB_PATH}")

# Blob store for product images: "local" (IMAGES_DIR) or "supabase"
BLOB_BACKEND = os.getenv("BLOB_BACKEND", "local").strip().lower()
# Folder inside the bucket that holds product images
BLOB_FOLDER = os.getenv("BLOB_FOLDER", "products")

# Supabase Storage
SUPABASE_URL = os.getenv("SUPABASE_URL", "")
SUPABASE_SERVICE_KEY = os.getenv("SUPABASE_SERVICE_KEY", "")
SUPABASE_BUCKET = os.getenv("SUPABASE_BUCKET", "product-images")

# Seconds before an HTTP call to a remote store gives up
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "15"))

# Listing
PAGE_SIZE_OPTIONS = (10, 25, 50, 100)
DEFAULT_PAGE_SIZE = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))
if DEFAULT_PAGE_SIZE not in PAGE_SIZE_OPTIONS:
    DEFAULT_PAGE_SIZE = PAGE_SIZE_OPTIONS[0]

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# App settings
APP_TITLE = "Catalog Admin"
APP_PORT = int(os.getenv("APP_PORT", "8080"))
APP_HOST = os.getenv("APP_HOST", "0.0.0.0")

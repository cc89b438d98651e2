import os
from dotenv import load_dotenv

# Ensure env vars are loaded once here
load_dotenv()

# Database; the local default keeps `uvicorn portfolio.main:app` runnable without setup
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./portfolio.db")

DB_POOL_SIZE = int(os.getenv("DB_POOL_SIZE", "10"))
DB_MAX_OVERFLOW = int(os.getenv("DB_MAX_OVERFLOW", "20"))
DB_POOL_TIMEOUT = int(os.getenv("DB_POOL_TIMEOUT", "60"))
DB_POOL_RECYCLE = int(os.getenv("DB_POOL_RECYCLE", "1800"))

# Auth (owner login for the admin area)
JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-change-me")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
ACCESS_TOKEN_EXPIRE_MINUTES = int(os.getenv("ACCESS_TOKEN_EXPIRE_MINUTES", str(60 * 24)))

# Uploaded images are written here and served under /uploads
ROOT_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
UPLOADS_DIR = os.getenv("UPLOADS_DIR", os.path.join(ROOT_DIR, "uploads"))
PUBLIC_BASE_URL = os.getenv("PUBLIC_BASE_URL", "http://localhost:8000").rstrip("/")

CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("CORS_ORIGINS", "http://localhost:3000").split(",")
    if o.strip()
]


def positive_int_env(name: str, default: int) -> int:
    value = int(os.getenv(name, str(default)))
    if value < 1:
        raise ValueError(f"{name} must be at least 1, got {value}")
    return value


# Listing page sizes
BLOGS_PER_PAGE = positive_int_env("BLOGS_PER_PAGE", 12)
ADMIN_PAGE_SIZE = positive_int_env("ADMIN_PAGE_SIZE", 20)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

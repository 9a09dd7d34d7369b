from pathlib import Path
import os

from dotenv import load_dotenv

# Load environment variables from the repo root .env (if present).
REPO_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(REPO_ROOT / ".env")

HOST = os.getenv("TASK_API_HOST", "0.0.0.0")
PORT = int(os.getenv("TASK_API_PORT", "8080"))
RELOAD = os.getenv("TASK_API_RELOAD", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Front-end assets served at "/" when the directory exists.
STATIC_DIR = Path(os.getenv("STATIC_DIR", str(REPO_ROOT / "frontend" / "web")))

_cors_origins = os.getenv("CORS_ORIGINS", "*")
CORS_ORIGINS = [origin.strip() for origin in _cors_origins.split(",") if origin.strip()]
CORS_METHODS = ["POST", "GET", "OPTIONS", "PUT", "DELETE"]
CORS_HEADERS = [
    "Accept",
    "Content-Type",
    "Content-Length",
    "Accept-Encoding",
    "X-CSRF-Token",
    "Authorization",
]

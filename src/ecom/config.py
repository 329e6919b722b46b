"""
config.py
---------
Central configuration module. Loads environment variables from the .env
file and exposes them as typed constants.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()


# ── Storage ───────────────────────────────────────────────
# Default: <repo root>/data when running from an editable install.
DATA_DIR: Path = Path(
    os.getenv("ECOM_DATA_DIR", str(Path(__file__).resolve().parents[2] / "data"))
)

# ── Admin API server ──────────────────────────────────────
HOST: str = os.getenv("ECOM_HOST", "127.0.0.1")
PORT: int = int(os.getenv("ECOM_PORT", "8000"))

# Origin the admin forms send their requests to.
ADMIN_URL: str = os.getenv("ECOM_ADMIN_URL", f"http://{HOST}:{PORT}")

# ── Storefront ────────────────────────────────────────────
# Store-scoped API root, e.g. http://127.0.0.1:8000/api/<store id>
API_URL: str = os.getenv("ECOM_API_URL", "").rstrip("/")

# ── HTTP client ───────────────────────────────────────────
HTTP_TIMEOUT_SECONDS: float = float(os.getenv("ECOM_HTTP_TIMEOUT_SECONDS", "10"))

# ── Logging ───────────────────────────────────────────────
LOG_LEVEL: str = os.getenv("ECOM_LOG_LEVEL", "INFO").upper()

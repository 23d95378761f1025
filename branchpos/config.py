import os
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
TEMPLATES_DIR = BASE_DIR / "templates"

# REST backend
API_BASE_URL = os.environ.get("BRANCHPOS_API_URL", "http://localhost:8081/api").rstrip("/")
API_TIMEOUT = float(os.environ.get("BRANCHPOS_API_TIMEOUT", "15"))
API_TOKEN = os.environ.get("BRANCHPOS_API_TOKEN") or None

# Used once at start-up when no token is configured
API_USERNAME = os.environ.get("BRANCHPOS_USERNAME") or None
API_PASSWORD = os.environ.get("BRANCHPOS_PASSWORD") or None

# Logging
LOG_LEVEL = os.environ.get("BRANCHPOS_LOG_LEVEL", "INFO").upper()
LOG_DIR = Path(os.environ.get("BRANCHPOS_LOG_DIR", "logs"))

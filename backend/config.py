# config.py
import logging
import os
from dotenv import load_dotenv

logger = logging.getLogger(__name__)

# Load local .env (in a packaged build, env vars are injected by the host)
load_dotenv()

# --- Completion API config ---
# No key means Leaf answers from the canned reply lists.
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY") or ""
OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4")
OPENAI_API_URL = os.getenv(
    "OPENAI_API_URL",
    "https://api.openai.com/v1/chat/completions",
)


def _timeout_from_env(raw):
    """Unset or blank means no client-side timeout."""
    if not raw or not raw.strip():
        return None
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring non-numeric OPENAI_TIMEOUT=%r; no timeout", raw)
        return None


OPENAI_TIMEOUT = _timeout_from_env(os.getenv("OPENAI_TIMEOUT"))

# --- Local storage ---
DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///leaf_garden.sqlite3")

# --- App / server ---
FRONTEND_ORIGIN = os.getenv("FRONTEND_ORIGIN")
PORT = int(os.getenv("PORT", "5000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

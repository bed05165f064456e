"""Runtime configuration for the PixAI job client.

Architectural role:
    Centralizes endpoint selection, polling defaults, and credential lookup for
    `pixai.transport`, `pixai.jobs`, and the CLI adapter.

Determinism:
    Deterministic for a fixed process environment and key files. Values are resolved
    at import time (plus runtime key-file reads in `load_key`).

Failure behavior:
    Missing key material is represented as `None`; callers decide whether that is
    fatal. Malformed numeric environment values raise `ValueError` at import.
"""

import os
from dotenv import load_dotenv

load_dotenv()


def _optional_float(name):
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return float(value)


def _optional_int(name):
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return int(value)


# GraphQL endpoint used for task creation, status, outputs, and media lookups.
API_URL = os.getenv("PIXAI_API_URL", "https://api.pixai.art/graphql")
KEY_FILE = "config/pixai.key"

# Label embedded in downloaded file names (`picture_<service>_<timestamp>.png`).
SERVICE_NAME = os.getenv("PIXAI_SERVICE_NAME", "PixAI")
OUTPUT_DIR = os.getenv("PIXAI_OUTPUT_DIR", "")

# Polling controls. `None` bounds keep the unbounded reference behavior.
POLL_INTERVAL = float(os.getenv("PIXAI_POLL_INTERVAL", "5"))
POLL_TIMEOUT = _optional_float("PIXAI_POLL_TIMEOUT")
MAX_POLLS = _optional_int("PIXAI_MAX_POLLS")

# Per-request HTTP timeout in seconds; unset means wait indefinitely.
REQUEST_TIMEOUT = _optional_float("PIXAI_REQUEST_TIMEOUT")


def load_key(path=KEY_FILE):
    """Load API key from environment override or key file.

    Resolution order:
        1. Environment variable inferred from file stem (for example
           `config/pixai.key` -> `PIXAI_API_KEY`).
        2. Raw file contents at `path`.

    Args:
        path: Configured key file path or `None`.

    Returns:
        Key string or `None` when not available.

    Edge cases:
        - `None` path returns `None`.
        - Missing or empty file returns `None`.
    """
    if not path:
        return None
    key_name = os.path.splitext(os.path.basename(path))[0].upper() + "_API_KEY"
    env_value = os.getenv(key_name)
    if env_value:
        return env_value
    if not os.path.exists(path):
        return None
    with open(path, "r") as f:
        return f.read().strip() or None

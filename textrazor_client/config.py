"""
textrazor-client shared configuration, constants, and module-level state.
Standalone module — no imports from other project files.
"""

import os

# ---------------------------------------------------------------------------
# .env path and helpers
# ---------------------------------------------------------------------------

_PACKAGE_DIR = os.path.dirname(os.path.abspath(__file__))
_PROJECT_ROOT = os.path.dirname(_PACKAGE_DIR)

ENV_PATH = os.path.join(_PROJECT_ROOT, ".env")

_ENV_PREFIX = "TEXTRAZOR_"


def load_env():
    """Read KEY=VALUE pairs from .env, then let the process environment win."""
    env = {}
    if os.path.exists(ENV_PATH):
        with open(ENV_PATH) as f:
            for line in f:
                line = line.strip()
                if line and not line.startswith("#") and "=" in line:
                    key, val = line.split("=", 1)
                    env[key.strip()] = val.strip()
    for key, val in os.environ.items():
        if key.startswith(_ENV_PREFIX):
            env[key] = val
    return env


def _env_bool(key, default=False):
    """Parse common boolean env formats."""
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(key, default):
    """Parse integer env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_float(key, default):
    """Parse float env values with fallback."""
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return float(raw)
    except ValueError:
        return default


# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

VERSION = "0.1.0"

DEFAULT_ENDPOINT = "http://api.textrazor.com"
DEFAULT_SECURE_ENDPOINT = "https://api.textrazor.com"
DEFAULT_USE_COMPRESSION = True
DEFAULT_USE_ENCRYPTION = True

API_KEY_HEADER = "X-TextRazor-Key"

CONTENT_TYPE_JSON = "application/json"
CONTENT_TYPE_CSV = "application/csv"
CONTENT_TYPE_FORM = "application/x-www-form-urlencoded"

CONTRACT_SCHEMA_VERSION = "1.0"

# ---------------------------------------------------------------------------
# Module-level state (loaded from .env and the environment)
# ---------------------------------------------------------------------------

env = load_env()

API_KEY = env.get("TEXTRAZOR_API_KEY", "")
ENDPOINT = env.get("TEXTRAZOR_ENDPOINT") or DEFAULT_ENDPOINT
SECURE_ENDPOINT = env.get("TEXTRAZOR_SECURE_ENDPOINT") or DEFAULT_SECURE_ENDPOINT
USE_COMPRESSION = _env_bool("TEXTRAZOR_USE_COMPRESSION", DEFAULT_USE_COMPRESSION)
USE_ENCRYPTION = _env_bool("TEXTRAZOR_USE_ENCRYPTION", DEFAULT_USE_ENCRYPTION)

# None leaves the deadline to the transport.
HTTP_TIMEOUT_SECONDS = _env_float("TEXTRAZOR_HTTP_TIMEOUT_SECONDS", None)
HTTP_MAX_RESPONSE_BYTES = _env_int("TEXTRAZOR_HTTP_MAX_RESPONSE_BYTES", 50_000_000)
HTTP_LOG_ENABLED = _env_bool("TEXTRAZOR_HTTP_LOG", False)
HTTP_LOG_SAMPLE_RATE = min(1.0, max(0.0, _env_float("TEXTRAZOR_HTTP_LOG_SAMPLE_RATE", 1.0)))

MCP_RESPONSE_MODE = (env.get("TEXTRAZOR_MCP_RESPONSE_MODE") or "legacy").strip().lower()
if MCP_RESPONSE_MODE not in {"legacy", "envelope"}:
    MCP_RESPONSE_MODE = "legacy"

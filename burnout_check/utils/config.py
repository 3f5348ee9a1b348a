import logging
import os

APP_TITLE = os.environ.get("BURNOUT_APP_TITLE", "Burnout Self-Assessment")


def resolve_log_level(name: str) -> str:
    # unknown names fall back to INFO
    name = (name or "").strip().upper()
    if isinstance(logging.getLevelName(name), int):
        return name
    return "INFO"


LOG_LEVEL = resolve_log_level(os.environ.get("BURNOUT_LOG_LEVEL", "INFO"))

# Comma-separated, "*" allows any frontend
CORS_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("BURNOUT_CORS_ORIGINS", "*").split(",")
    if origin.strip()
]

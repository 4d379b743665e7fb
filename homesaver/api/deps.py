"""FastAPI dependency injection."""

from datetime import date


def get_today() -> date:
    return date.today()

"""Core: config, rate limiter, lifespan and exception handlers."""

from bookhaven.core.config import Settings, get_settings

__all__ = ["Settings", "get_settings"]

"""Services layer - long-lived, stateful wiring around components."""

from meridian.services.config_svc import ConfigService

__all__ = ["ConfigService"]

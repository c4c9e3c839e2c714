"""The demo JSON API: health probe, user listing/creation and integer sum."""

from demo_api.service.api import create_app
from demo_api.service.models import FIXED_USERS, HealthStatus, SumResult, User

__all__ = ["FIXED_USERS", "HealthStatus", "SumResult", "User", "create_app"]

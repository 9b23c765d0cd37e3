from datetime import datetime, timezone

from app.config.profile import DEFAULT_PROFILE, ServiceProfile


def get_now() -> datetime:
    """Current instant, overridden in tests to pin the clock."""
    return datetime.now(timezone.utc)


def get_profile() -> ServiceProfile:
    return DEFAULT_PROFILE

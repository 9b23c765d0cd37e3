from datetime import datetime, timedelta, timezone
from app.config.profile import DEFAULT_PROFILE, ServiceProfile, check_headway
from app.schemas.arrival import ArrivalClosed, ArrivalOpen, ArrivalResult
from app.utils.time_utils import format_hhmm, in_daily_window, minutes_of_day, to_local


def is_open(minute: int, profile: ServiceProfile = DEFAULT_PROFILE) -> bool:
    return in_daily_window(minute, profile.opens_at, profile.closes_at)


def is_last_window(minute: int, profile: ServiceProfile = DEFAULT_PROFILE) -> bool:
    return in_daily_window(minute, profile.last_train_from, profile.closes_at)


def compute_next_arrival(
    now: datetime,
    headway_min: int,
    profile: ServiceProfile = DEFAULT_PROFILE,
) -> ArrivalResult:
    """Simulated next arrival for `now`.

    Rules for the default profile:
     - service open from 05:30 to 01:15 the next day, bounds included
     - one train every `headway_min` minutes
     - `is_last` while the current time is between 00:45 and 01:15

    Outside the window only the closed marker and the timezone are returned.
    Raises `InvalidArgument` for a missing, non-positive or non-integer headway.
    """
    check_headway(headway_min)

    tz = profile.tzinfo
    local_now = to_local(now, tz)
    minute = minutes_of_day(local_now)

    if not is_open(minute, profile):
        return ArrivalClosed(timezone=profile.timezone)

    # absolute time, rendered on the local clock
    next_at = (local_now.astimezone(timezone.utc) + timedelta(minutes=headway_min)).astimezone(tz)
    return ArrivalOpen(
        headway_min=headway_min,
        next_arrival=format_hhmm(next_at),
        is_last=is_last_window(minute, profile),
        timezone=profile.timezone,
    )

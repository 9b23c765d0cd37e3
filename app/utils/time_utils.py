from datetime import datetime, tzinfo


def to_local(dt: datetime, tz: tzinfo) -> datetime:
    """Express `dt` in `tz`. Naive datetimes are taken as already local to `tz`."""
    if dt.tzinfo is None:
        return dt.replace(tzinfo=tz)
    return dt.astimezone(tz)


def minutes_of_day(dt: datetime) -> int:
    """Minutes since midnight (0-1439) of the wall-clock time in `dt`."""
    return dt.hour * 60 + dt.minute


def format_hhmm(dt: datetime) -> str:
    return f"{dt.hour:02d}:{dt.minute:02d}"


def in_daily_window(minute: int, start: int, end: int) -> bool:
    """Whether `minute` lies in [start, end], both inclusive.

    When `start > end` the window wraps past midnight, e.g. 330 -> 75 covers
    05:30 up to 01:15 of the following day.
    """
    if start <= end:
        return start <= minute <= end
    return minute >= start or minute <= end

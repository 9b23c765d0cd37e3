"""Fixed description of the simulated line."""
from dataclasses import dataclass
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.core.errors import InvalidArgument

MINUTES_PER_DAY = 24 * 60


def _check_minute(name: str, value: int) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value < MINUTES_PER_DAY:
        raise InvalidArgument(f"{name} must be a minute of day in [0, {MINUTES_PER_DAY - 1}], got {value!r}")


def check_headway(headway_min: int) -> None:
    """Raise `InvalidArgument` unless `headway_min` is a positive integer."""
    if isinstance(headway_min, bool) or not isinstance(headway_min, int) or headway_min <= 0:
        raise InvalidArgument(f"headway must be a positive number of minutes, got {headway_min!r}")


@dataclass(frozen=True)
class ServiceProfile:
    """Line, headway, timezone and daily window bounds.

    Window bounds are minutes since local midnight. A window whose start is
    after its end wraps past midnight (05:30 -> 01:15 the next day).
    """

    line: str
    headway_min: int
    timezone: str
    opens_at: int
    closes_at: int
    last_train_from: int

    def __post_init__(self) -> None:
        if not self.line:
            raise InvalidArgument("line must not be empty")
        check_headway(self.headway_min)
        _check_minute("opens_at", self.opens_at)
        _check_minute("closes_at", self.closes_at)
        _check_minute("last_train_from", self.last_train_from)
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise InvalidArgument(f"unknown timezone {self.timezone!r}") from exc

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)


# M1, Europe/Paris: open 05:30 -> 01:15, last trains from 00:45, every 3 minutes
DEFAULT_PROFILE = ServiceProfile(
    line="M1",
    headway_min=3,
    timezone="Europe/Paris",
    opens_at=5 * 60 + 30,
    closes_at=1 * 60 + 15,
    last_train_from=45,
)

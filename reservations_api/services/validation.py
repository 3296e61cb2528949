"""
Reservation validation pipeline.

Every check is a pure function over a ``ReservationCandidate`` that returns
``None`` when it passes or the ``ReservationError`` it fails with.
``run_checks`` evaluates them in order and stops at the first failure, so a
rejected request always reports exactly one error and nothing is persisted.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from reservations_api.errors import (
    ClosedDayError,
    InvalidDateError,
    InvalidFieldError,
    InvalidInitialStatusError,
    InvalidPartySizeError,
    InvalidTextFieldError,
    InvalidTimeError,
    MalformedRequestError,
    MissingFieldError,
    OutsideHoursError,
    PastDateError,
    ReservationError,
)
from reservations_api.models.reservation import ReservationStatus


VALID_FIELDS = (
    "reservation_id",
    "first_name",
    "last_name",
    "mobile_number",
    "reservation_date",
    "reservation_time",
    "people",
    "status",
    "created_at",
    "updated_at",
)

REQUIRED_FIELDS = (
    "first_name",
    "last_name",
    "mobile_number",
    "reservation_date",
    "reservation_time",
    "people",
)

TEXT_FIELDS = ("first_name", "last_name", "mobile_number")

# Hours 20-29 match on purpose; out-of-range hours fail the opening-hours check.
TIME_PATTERN = re.compile(r"^(0\d|1\d|2\d):[0-5]\d$")

DAY_NAMES = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _parse_clock(value: str) -> time:
    return datetime.strptime(value, "%H:%M").time()


def _format_clock(value: time) -> str:
    suffix = "am" if value.hour < 12 else "pm"
    return f"{(value.hour % 12) or 12}:{value.minute:02d}{suffix}"


@dataclass(frozen=True)
class ReservationPolicy:
    """Restaurant rules a reservation must satisfy"""
    closed_weekday: int = 1
    opens_at: time = time(10, 30)
    last_seating: time = time(21, 30)

    @classmethod
    def from_settings(cls, settings) -> "ReservationPolicy":
        return cls(
            closed_weekday=settings.closed_weekday,
            opens_at=_parse_clock(settings.opening_time),
            last_seating=_parse_clock(settings.last_seating_time),
        )

    @property
    def closed_day_name(self) -> str:
        return DAY_NAMES[self.closed_weekday]

    def is_open_at(self, hour: int, minute: int) -> bool:
        """Both ends of the window are inclusive, to the minute"""
        requested = hour * 60 + minute
        opens = self.opens_at.hour * 60 + self.opens_at.minute
        closes = self.last_seating.hour * 60 + self.last_seating.minute
        return opens <= requested <= closes

    def closed_day_error(self) -> ClosedDayError:
        return ClosedDayError(self.closed_day_name)

    def outside_hours_error(self) -> OutsideHoursError:
        return OutsideHoursError(_format_clock(self.opens_at), _format_clock(self.last_seating))


DEFAULT_POLICY = ReservationPolicy()


@dataclass
class ReservationCandidate:
    """Raw request payload plus everything the checks compare it against"""
    payload: Any
    now: datetime
    policy: ReservationPolicy = DEFAULT_POLICY

    @property
    def data(self) -> Dict[str, Any]:
        return self.payload["data"]


CheckResult = Optional[ReservationError]
Check = Callable[[ReservationCandidate], CheckResult]


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _parse_date(value: Any) -> Optional[date]:
    if not isinstance(value, str):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def _split_time(value: str) -> Tuple[int, int]:
    hour, minute = value.split(":")
    return int(hour), int(minute)


def _party_size(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if isinstance(value, int) and value > 0:
        return value
    return None


def _reservation_moment(data: Dict[str, Any]) -> datetime:
    """Last second of the requested minute; hours past 23 roll into the next day"""
    hour, minute = _split_time(data["reservation_time"])
    midnight = datetime.combine(_parse_date(data["reservation_date"]), time())
    return midnight + timedelta(hours=hour, minutes=minute, seconds=59)


# Checks

def has_data(candidate: ReservationCandidate) -> CheckResult:
    payload = candidate.payload
    if isinstance(payload, dict) and isinstance(payload.get("data"), dict):
        return None
    return MalformedRequestError()


def has_only_valid_fields(candidate: ReservationCandidate) -> CheckResult:
    invalid = [name for name in candidate.data if name not in VALID_FIELDS]
    if invalid:
        return InvalidFieldError(invalid)
    return None


def has_required_fields(candidate: ReservationCandidate) -> CheckResult:
    for name in REQUIRED_FIELDS:
        if _is_blank(candidate.data.get(name)):
            return MissingFieldError(name)
    return None


def text_fields_are_text(candidate: ReservationCandidate) -> CheckResult:
    for name in TEXT_FIELDS:
        if not isinstance(candidate.data[name], str):
            return InvalidTextFieldError(name)
    return None


def date_is_valid(candidate: ReservationCandidate) -> CheckResult:
    if _parse_date(candidate.data["reservation_date"]) is None:
        return InvalidDateError()
    return None


def time_is_valid(candidate: ReservationCandidate) -> CheckResult:
    value = candidate.data["reservation_time"]
    if isinstance(value, str) and TIME_PATTERN.fullmatch(value):
        return None
    return InvalidTimeError()


def people_is_positive_integer(candidate: ReservationCandidate) -> CheckResult:
    if _party_size(candidate.data["people"]) is None:
        return InvalidPartySizeError()
    return None


def date_is_not_closed_day(candidate: ReservationCandidate) -> CheckResult:
    requested = _parse_date(candidate.data["reservation_date"])
    if requested.weekday() == candidate.policy.closed_weekday:
        return candidate.policy.closed_day_error()
    return None


def date_is_in_future(candidate: ReservationCandidate) -> CheckResult:
    now = candidate.now.replace(microsecond=0)
    try:
        moment = _reservation_moment(candidate.data)
    except OverflowError:
        # Rolled past datetime.max; the hours check rejects it.
        return None
    if now > moment:
        return PastDateError()
    return None


def time_is_within_hours(candidate: ReservationCandidate) -> CheckResult:
    hour, minute = _split_time(candidate.data["reservation_time"])
    if candidate.policy.is_open_at(hour, minute):
        return None
    return candidate.policy.outside_hours_error()


def status_is_booked(candidate: ReservationCandidate) -> CheckResult:
    status = candidate.data.get("status")
    if _is_blank(status) or status == ReservationStatus.BOOKED.value:
        return None
    return InvalidInitialStatusError(status)


CREATE_CHECKS: Tuple[Check, ...] = (
    has_data,
    has_only_valid_fields,
    has_required_fields,
    text_fields_are_text,
    date_is_valid,
    time_is_valid,
    people_is_positive_integer,
    date_is_not_closed_day,
    date_is_in_future,
    time_is_within_hours,
    status_is_booked,
)

UPDATE_CHECKS: Tuple[Check, ...] = CREATE_CHECKS[:-1]


def run_checks(checks: Sequence[Check], candidate: ReservationCandidate) -> CheckResult:
    """Return the first failing check's error, or None if all pass"""
    for check in checks:
        error = check(candidate)
        if error is not None:
            return error
    return None


def normalize_reservation(data: Dict[str, Any]) -> Dict[str, Any]:
    """Convert an accepted payload into column values; storage-managed fields are dropped"""
    hour, minute = _split_time(data["reservation_time"])
    record = {
        "first_name": data["first_name"].strip(),
        "last_name": data["last_name"].strip(),
        "mobile_number": data["mobile_number"].strip(),
        "reservation_date": _parse_date(data["reservation_date"]),
        "reservation_time": time(hour, minute),
        "people": _party_size(data["people"]),
    }
    if not _is_blank(data.get("status")):
        record["status"] = data["status"]
    return record


def validate_reservation(
    payload: Any,
    now: datetime,
    policy: ReservationPolicy = DEFAULT_POLICY,
    creating: bool = True,
) -> Dict[str, Any]:
    """
    Run the create (or update) pipeline over a raw request body.

    Returns the normalized record on success, raises the first
    ``ReservationError`` encountered otherwise.
    """
    candidate = ReservationCandidate(payload=payload, now=now, policy=policy)
    error = run_checks(CREATE_CHECKS if creating else UPDATE_CHECKS, candidate)
    if error is not None:
        raise error
    return normalize_reservation(candidate.data)

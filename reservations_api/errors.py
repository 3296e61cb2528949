"""Reservation error taxonomy"""

from typing import Iterable, Optional


class ReservationError(Exception):
    """Base class for errors reported back to the client"""

    kind = "ReservationError"
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MalformedRequestError(ReservationError):
    kind = "MalformedRequest"

    def __init__(self):
        super().__init__("Body must have data property.")


class InvalidFieldError(ReservationError):
    kind = "InvalidField"

    def __init__(self, fields: Iterable[str]):
        self.fields = list(fields)
        super().__init__(f"Invalid field(s): {', '.join(self.fields)}")


class MissingFieldError(ReservationError):
    kind = "MissingField"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"A '{field}' property is required.")


class InvalidTextFieldError(ReservationError):
    kind = "InvalidTextField"

    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} must be text")


class InvalidDateError(ReservationError):
    kind = "InvalidDate"

    def __init__(self):
        super().__init__("reservation_date must be a valid date")


class InvalidTimeError(ReservationError):
    kind = "InvalidTime"

    def __init__(self):
        super().__init__("reservation_time must be a valid time")


class InvalidPartySizeError(ReservationError):
    kind = "InvalidPartySize"

    def __init__(self):
        super().__init__(
            "Invalid people field. People must be a positive integer greater than 0"
        )


class ClosedDayError(ReservationError):
    kind = "ClosedDay"

    def __init__(self, day_name: str = "Tuesday"):
        super().__init__(f"We are closed on {day_name}s")


class PastDateError(ReservationError):
    kind = "PastDate"

    def __init__(self):
        super().__init__("reservation_date must be set in the future")


class OutsideHoursError(ReservationError):
    kind = "OutsideHours"

    def __init__(self, opens: str = "10:30am", last_seating: str = "9:30pm"):
        super().__init__(f"Reservations must be made between {opens} to {last_seating}")


class InvalidInitialStatusError(ReservationError):
    kind = "InvalidInitialStatus"

    def __init__(self, status: str):
        self.status = status
        super().__init__(f"A new reservation cannot have a status of {status}")


class InvalidStatusError(ReservationError):
    kind = "InvalidStatus"

    def __init__(self, status: object):
        self.status = status
        super().__init__(
            f"{status} is not a valid status. "
            "Status must be booked, seated, finished, or cancelled"
        )


class ReservationFinishedError(ReservationError):
    kind = "ReservationFinished"

    def __init__(self):
        super().__init__("Reservations that are finished cannot be updated.")


class InvalidTransitionError(ReservationError):
    kind = "InvalidTransition"

    def __init__(self, current: str, target: str):
        self.current = current
        self.target = target
        super().__init__(f"A {current} reservation cannot be changed to {target}.")


class NotFoundError(ReservationError):
    kind = "NotFound"
    status_code = 404

    def __init__(self, reservation_id: Optional[object] = None):
        self.reservation_id = reservation_id
        super().__init__(f"Reservation {reservation_id} cannot be found.")

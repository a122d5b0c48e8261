"""Domain enums for orders, staff requests and transcripts."""

from __future__ import annotations

from enum import Enum

from hotel_voice_assistant.core.errors import InvalidStatusError


class TranscriptRole(str, Enum):
    """Speaker of a transcript line."""

    user = "user"
    assistant = "assistant"


class OrderStatus(str, Enum):
    """
    Lifecycle of a guest order.

    Orders are always created ``pending``; staff move them forward.
    """

    pending = "pending"
    confirmed = "confirmed"
    in_progress = "in_progress"
    delivering = "delivering"
    completed = "completed"
    cancelled = "cancelled"


class StaffRequestStatus(str, Enum):
    """Status vocabulary shown on the staff dashboard."""

    new = "New"
    confirmed = "Confirmed"
    doing = "Doing"
    delivering = "Delivering"
    done = "Done"
    error = "Error"


class MessageSender(str, Enum):
    """Author of a staff request message."""

    staff = "staff"
    system = "system"


class DeliveryTime(str, Enum):
    """Delivery windows a guest can pick."""

    asap = "asap"
    thirty_minutes = "30min"
    one_hour = "1hour"
    specific = "specific"

    @property
    def estimated_time(self) -> str:
        return _ESTIMATED_TIMES[self]


_ESTIMATED_TIMES = {
    DeliveryTime.asap: "15-20 minutes",
    DeliveryTime.thirty_minutes: "30 minutes",
    DeliveryTime.one_hour: "1 hour",
    DeliveryTime.specific: "at the requested time",
}


class ReferenceType(str, Enum):
    """Kind of reference material the assistant can surface."""

    image = "image"
    document = "document"
    link = "link"


def parse_status(enum_cls, value: str):
    """
    Look up a status member by value.

    Raises:
        InvalidStatusError: ``value`` is not part of ``enum_cls``.
    """
    try:
        return enum_cls(value)
    except ValueError:
        raise InvalidStatusError(value, [member.value for member in enum_cls]) from None

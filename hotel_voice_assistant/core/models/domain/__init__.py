"""Domain value types."""

from .enums import (
    DeliveryTime,
    MessageSender,
    OrderStatus,
    ReferenceType,
    StaffRequestStatus,
    TranscriptRole,
    parse_status,
)

__all__ = [
    "DeliveryTime",
    "MessageSender",
    "OrderStatus",
    "ReferenceType",
    "StaffRequestStatus",
    "TranscriptRole",
    "parse_status",
]

# receipt_processor/validation/receipt.py
from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterator, Optional, Tuple

from ..schemas import Receipt
from .formats import (
    is_date_format, is_time_format, is_price_format,
    is_retailer_format, is_description_format,
)

class InvalidKind(str, Enum):
    STRUCTURAL = "structural"   # missing field, empty item list
    FORMAT = "format"           # present but fails its pattern/parse check

@dataclass(frozen=True)
class ValidationVerdict:
    is_valid: bool
    kind: Optional[InvalidKind] = None
    reason: Optional[str] = None

    @classmethod
    def ok(cls) -> "ValidationVerdict":
        return cls(True)

    @classmethod
    def invalid(cls, kind: InvalidKind, reason: str) -> "ValidationVerdict":
        return cls(False, kind, reason)

    def __bool__(self) -> bool:
        return self.is_valid

def _field(name: str, value, check: Callable[[object], bool], expected: str) -> Optional[ValidationVerdict]:
    if value is None or value == "":
        return ValidationVerdict.invalid(InvalidKind.STRUCTURAL, f"{name} is required")
    if not check(value):
        return ValidationVerdict.invalid(InvalidKind.FORMAT, f"{name} must be {expected}, got {value!r}")
    return None

def _checks(receipt: Receipt) -> Iterator[Optional[ValidationVerdict]]:
    yield _field("retailer", receipt.retailer, is_retailer_format,
                 "letters, digits, spaces, '&' or '-'")
    yield _field("purchaseDate", receipt.purchase_date, is_date_format, "a YYYY-MM-DD date")
    yield _field("purchaseTime", receipt.purchase_time, is_time_format, "a 24-hour HH:MM time")

    if receipt.items is None:
        yield ValidationVerdict.invalid(InvalidKind.STRUCTURAL, "items is required")
    elif len(receipt.items) < 1:
        yield ValidationVerdict.invalid(InvalidKind.STRUCTURAL, "items must contain at least one item")

    yield _field("total", receipt.total, is_price_format, "an amount with two decimals")

    items: Tuple = receipt.items or ()
    for i, item in enumerate(items):
        yield _field(f"items[{i}].shortDescription", item.short_description, is_description_format,
                     "letters, digits, spaces or '-'")
    for i, item in enumerate(items):
        yield _field(f"items[{i}].price", item.price, is_price_format, "an amount with two decimals")

def validate_receipt(receipt: Receipt) -> ValidationVerdict:
    """
    Return the verdict for a decoded receipt.
    Checks run retailer, purchaseDate, purchaseTime, items, total, then every
    item description, then every item price; the first failure is reported.
    """
    for failure in _checks(receipt):
        if failure is not None:
            return failure
    return ValidationVerdict.ok()

# receipt_processor/rules/ruleset.py
"""
The seven point rules. Each takes a validated Receipt and returns a
non-negative int; a value a rule cannot parse makes that rule return 0.
"""
import re
from datetime import datetime
from typing import Callable, Tuple

from ..schemas import Receipt
from ..utils.money import to_cents

Rule = Callable[[Receipt], int]

# -----------------------------
# Tunables
# -----------------------------
ROUND_DOLLAR_POINTS = 50
QUARTER_MULTIPLE_POINTS = 25
ITEM_PAIR_POINTS = 5
ODD_DAY_POINTS = 6
AFTERNOON_POINTS = 10
AFTERNOON_HOUR = 14

# price * 0.2 in cents: cents / 500
DESCRIPTION_PRICE_DIVISOR = 500

ALNUM_RE = re.compile(r"[A-Za-z0-9]")

def retailer_alnum(receipt: Receipt) -> int:
    """One point per ASCII letter or digit in the retailer name."""
    return len(ALNUM_RE.findall(receipt.retailer or ""))

def round_dollar(receipt: Receipt) -> int:
    cents = to_cents(receipt.total)
    if cents is not None and cents % 100 == 0:
        return ROUND_DOLLAR_POINTS
    return 0

def quarter_multiple(receipt: Receipt) -> int:
    cents = to_cents(receipt.total)
    if cents is not None and cents % 25 == 0:
        return QUARTER_MULTIPLE_POINTS
    return 0

def item_pairs(receipt: Receipt) -> int:
    return len(receipt.items or ()) // 2 * ITEM_PAIR_POINTS

def description_length(receipt: Receipt) -> int:
    """
    For every item whose trimmed description length is a multiple of 3,
    add ceil(price * 0.2).
    """
    points = 0
    for item in receipt.items or ():
        desc = (item.short_description or "").strip()
        if len(desc) % 3 != 0:
            continue
        cents = to_cents(item.price)
        if cents is None or cents < 0:
            continue
        points += -(-cents // DESCRIPTION_PRICE_DIVISOR)
    return points

def odd_day(receipt: Receipt) -> int:
    try:
        day = datetime.strptime(receipt.purchase_date or "", "%Y-%m-%d").day
    except ValueError:
        return 0
    return ODD_DAY_POINTS if day % 2 else 0

def afternoon_window(receipt: Receipt) -> int:
    # Only the 14:xx hour counts, not the full 2pm-4pm window.
    try:
        hour = datetime.strptime(receipt.purchase_time or "", "%H:%M").hour
    except ValueError:
        return 0
    return AFTERNOON_POINTS if hour == AFTERNOON_HOUR else 0

DEFAULT_RULES: Tuple[Rule, ...] = (
    retailer_alnum,
    round_dollar,
    quarter_multiple,
    item_pairs,
    description_length,
    odd_day,
    afternoon_window,
)

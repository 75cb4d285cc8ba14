# receipt_processor/utils/money.py
import re
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP, localcontext
from typing import Optional

CENT = Decimal("0.01")

# plain decimal notation only; exponents like "1e999999999" are not amounts
AMOUNT_RE = re.compile(r"[+-]?\d+(\.\d+)?", re.ASCII)

def to_cents(amount: Optional[str]) -> Optional[int]:
    """
    Parse a currency string ("35.35") into integer cents (3535).
    Exact for any number of digits. Returns None when the value is missing
    or not a plain decimal number.
    """
    if amount is None:
        return None
    text = str(amount).strip()
    if AMOUNT_RE.fullmatch(text) is None:
        return None
    try:
        with localcontext() as ctx:
            # room for every input digit plus the two cent places
            ctx.prec = max(ctx.prec, len(text) + 3)
            return int(Decimal(text).quantize(CENT, rounding=ROUND_HALF_UP) * 100)
    except (InvalidOperation, ValueError):
        return None

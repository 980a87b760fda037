"""Money, timestamp and authentication-code formatting."""

from __future__ import annotations

import random
import string
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal

_CENTS = Decimal("0.01")
_AUTH_CODE_CHARS = string.ascii_uppercase + string.digits


def format_money(
    amount: Decimal | int | float | str,
    currency: str = "R$",
    decimal_separator: str = ",",
) -> str:
    """Format an amount as ``<currency> <integer><sep><two digits>``.

    Rounds half-up to cents. No thousands grouping is applied.

    >>> format_money(Decimal("99.9"))
    'R$ 99,90'
    """
    value = Decimal(str(amount)).quantize(_CENTS, rounding=ROUND_HALF_UP)
    sign = "-" if value < 0 else ""
    integer_part, _, cents = f"{abs(value):.2f}".partition(".")
    return f"{currency} {sign}{integer_part}{decimal_separator}{cents}"


def generate_auth_code(rng: random.Random | None = None) -> str:
    """Return a random code like ``A1B2-C3D4-E5F6-G7H8``."""
    rng = rng or random.SystemRandom()
    chars = [rng.choice(_AUTH_CODE_CHARS) for _ in range(16)]
    return "-".join("".join(chars[i:i + 4]) for i in range(0, 16, 4))


def format_timestamp(
    moment: datetime | None = None, fmt: str = "%d/%m/%Y %H:%M:%S"
) -> str:
    """Format ``moment`` (default: now, local time) for the footer."""
    return (moment or datetime.now()).strftime(fmt)

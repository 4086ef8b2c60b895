from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

ZERO = Decimal("0")
CENTS = Decimal("0.01")


def parse_decimal(value) -> Decimal | None:
    """Return ``value`` as a Decimal, or None when it is not a finite number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        return value if value.is_finite() else None
    normalized = str(value).strip().replace(",", ".")
    if not normalized:
        return None
    try:
        parsed = Decimal(normalized)
    except (InvalidOperation, ValueError):
        return None
    return parsed if parsed.is_finite() else None


def to_decimal(value) -> Decimal:
    # Aggregations treat missing or malformed quantities as zero.
    parsed = parse_decimal(value)
    return ZERO if parsed is None else parsed


def round2(value) -> Decimal:
    return to_decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)

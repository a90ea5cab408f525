"""Helpers for token amount normalization."""

from decimal import Decimal, InvalidOperation, localcontext

NEAR_NOMINATION_EXP = 24


def parse_near_amount(value) -> int:
    """Convert a human readable NEAR amount into yocto units.

    Args:
        value: Amount as string, int or Decimal (e.g. ``"100"`` or ``"0.5"``).

    Returns:
        int: Amount expressed in yoctoNEAR.

    Raises:
        ValueError: If the amount is not a finite, non-negative number or
            has more fractional digits than the nomination allows.
    """
    if isinstance(value, Decimal):
        amount = value
    else:
        raw = str(value).strip().replace(",", "")
        try:
            amount = Decimal(raw)
        except InvalidOperation as exc:
            raise ValueError(f"Invalid amount: {value!r}") from exc
    if not amount.is_finite() or amount < 0:
        raise ValueError(f"Invalid amount: {value!r}")
    with localcontext() as ctx:
        ctx.prec = 64
        scaled = amount.scaleb(NEAR_NOMINATION_EXP)
    if scaled != scaled.to_integral_value():
        raise ValueError(
            f"Amount {value!r} has more than {NEAR_NOMINATION_EXP} decimals"
        )
    return int(scaled)


__all__ = ["NEAR_NOMINATION_EXP", "parse_near_amount"]

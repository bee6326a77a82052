from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext

MoneyLike = str | Decimal

_MONEY_Q = Decimal("0.01")


def _exponent(value: Decimal) -> int:
    exp = value.as_tuple().exponent
    if not isinstance(exp, int):
        raise ValueError(f"Amount must be finite: {value}")
    return exp


def add_money(a: Decimal, b: Decimal) -> Decimal:
    """Exact sum of two finite amounts, however many digits it needs."""
    needed = max(a.adjusted(), b.adjusted()) - min(_exponent(a), _exponent(b)) + 2
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, needed)
        return a + b


def quantize_money(value: Decimal, places: MoneyLike = _MONEY_Q) -> Decimal:
    """Quantize monetary values for display; half-up regardless of context.

    Precision is widened to fit the integer digits of ``value``, so large
    totals never raise InvalidOperation.
    """
    quant = Decimal(places)
    needed = value.adjusted() - _exponent(quant) + 2
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, needed)
        return value.quantize(quant, rounding=ROUND_HALF_UP)


def format_amount(value: Decimal) -> str:
    return str(quantize_money(value))

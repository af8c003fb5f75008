import math
import re

_LEADING_SPACE = re.compile(
    "[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]*"
)
_FLOAT_PREFIX = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


def parse_amount(value: str) -> float:
    """Parse the leading decimal literal of ``value``, like JavaScript ``parseFloat``.

    Leading whitespace (the BOM included) is skipped and trailing text is
    ignored, so ``"12abc"`` gives ``12.0``. Only ASCII digits count. Text
    without a numeric prefix gives ``nan``.
    """
    text = value or ""
    match = _FLOAT_PREFIX.match(text, _LEADING_SPACE.match(text).end())
    if not match:
        return math.nan
    literal = match.group(0)
    if literal.endswith("Infinity"):
        return -math.inf if literal.startswith("-") else math.inf
    return float(literal)


def is_submittable(amount_text: str, category: str) -> bool:
    return bool(amount_text) and bool(category)


def ensure_valid_amount(amount: float) -> None:
    if math.isnan(amount):
        raise ValueError("Amount is not a number")
    if math.isinf(amount):
        raise ValueError("Amount must be finite")
    if amount < 0:
        raise ValueError("Amount cannot be negative")

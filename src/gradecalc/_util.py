"""Private helper utilities."""

import re as _re

import numpy as np

# leading whitespace, optional sign, digits with optional fraction, optional exponent
_LEADING_FLOAT = _re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_leading_float(text: str) -> float:
    """Parse the numeric prefix of a string, ignoring whatever follows it.

    Behaves like a browser's ``parseFloat``: ``"40%"`` is 40, ``"12 pts"`` is
    12. If the string does not begin with a number, the result is NaN rather
    than an exception.

    """
    match = _LEADING_FLOAT.match(text)
    if match is None:
        return np.nan
    return float(match.group(1))


def is_finite(x) -> bool:
    """Determine if x is a real, finite number."""
    try:
        return bool(np.isfinite(x))
    except TypeError:
        return False


def to_kebab_case(s: str) -> str:
    """Lowercase, join words with dashes and drop anything else."""
    s = _re.sub(r"\s+|_+", "-", s.lower())
    return _re.sub(r"[^\da-z-]+", "", s)

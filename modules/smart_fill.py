# modules/smart_fill.py
"""
Smart fill for the data grid: continue a column from one or two seed cells.

    predict([2, 4], 3)                     -> [6, 8, 10]
    predict(["2024-01-01", "2024-01-03"], 2) -> ["2024-01-05", "2024-01-07"]
    predict(["Class A1", "Class A3"], 2)   -> ["Class A5", "Class A7"]
    predict(["甲", "丙"], 2)                -> ["戊", "庚"]

Only the first and last seed set the slope. Anything that doesn't look like a
progression is repeated as-is. predict() never raises.
"""
from __future__ import annotations

import math
import re
from datetime import date, datetime, timedelta
from decimal import ROUND_HALF_UP, Context, Decimal
from fractions import Fraction
from numbers import Real
from typing import Any, List, NamedTuple, Optional, Sequence, Tuple

HEAVENLY_STEMS = ("甲", "乙", "丙", "丁", "戊", "己", "庚", "辛", "壬", "癸")
CHINESE_NUMERALS = ("一", "二", "三", "四", "五", "六", "七", "八", "九", "十")

# Pattern kinds
EMPTY = "empty"
DATE = "date"
NUMBER = "number"
TEXT = "text"
CYCLE = "cycle"

# Token step kinds
DIGITS = "number"
LETTER = "letter"
STEM = "stem"
NUMERAL = "numeral"
CONSTANT = "constant"

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_NUMBER_RE = re.compile(r"\s*[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\s*")
_CODE_RE = re.compile(r"\s*[+-]?0[0-9]")  # "007", "-01": identifiers, not amounts
_TOKEN_RE = re.compile(r"([0-9]+|[a-zA-Z]+|[\u4e00-\u9fa5])")
_DIGITS_RE = re.compile(r"[0-9]+")
_LETTER_RE = re.compile(r"[a-zA-Z]")

_HALF = Fraction(1, 2)
_CENTS = Decimal("0.01")
_WIDE = Context(prec=400)  # any finite float to the cent
_MAX_DIGITS = 1000  # longer digit runs are kept verbatim


class TokenStep(NamedTuple):
    kind: str
    value: Any                     # Fraction for counters, str for CONSTANT
    step: Fraction = Fraction(0)
    width: int = 0                 # zero-pad width for DIGITS


class Pattern(NamedTuple):
    kind: str
    start: Any = None              # last date / last number
    step: Any = None               # days (int) / float
    tokens: Tuple[TokenStep, ...] = ()


# -------------------------
# Parsing helpers
# -------------------------
def _round_half_up(x) -> int:
    return math.floor(x + _HALF) if isinstance(x, Fraction) else math.floor(x + 0.5)


def _as_date(value: Any) -> Optional[date]:
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        return None
    try:
        return datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return None


def _as_number(value: Any) -> Optional[float]:
    if isinstance(value, bool):
        return None
    if isinstance(value, Real):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            return None
    elif isinstance(value, str):
        if not _NUMBER_RE.fullmatch(value) or _CODE_RE.match(value):
            return None
        number = float(value)
    else:
        return None
    return number if math.isfinite(number) else None


def tokenize(text: str) -> List[str]:
    """Split into digit runs, letter runs, single CJK characters and the literals between them."""
    return [t for t in _TOKEN_RE.split(text) if t]


# -------------------------
# Classification
# -------------------------
def _token_step(first: str, last: str, span: int, compound: bool) -> TokenStep:
    def delta(a: int, b: int) -> Fraction:
        return Fraction(b - a, span) if span else Fraction(1)

    if (
        _DIGITS_RE.fullmatch(first) and _DIGITS_RE.fullmatch(last)
        and max(len(first), len(last)) <= _MAX_DIGITS
    ):
        a, b = int(first), int(last)
        width = len(first) if first.startswith("0") else 0
        return TokenStep(DIGITS, Fraction(b), delta(a, b), width)

    # a lone letter ("x") is a word; only count letters inside codes like "A1"
    if compound and _LETTER_RE.fullmatch(first) and _LETTER_RE.fullmatch(last):
        a, b = ord(first), ord(last)
        return TokenStep(LETTER, Fraction(b), delta(a, b))

    for kind, symbols in ((STEM, HEAVENLY_STEMS), (NUMERAL, CHINESE_NUMERALS)):
        if first in symbols and last in symbols:
            a, b = symbols.index(first), symbols.index(last)
            return TokenStep(kind, Fraction(b), delta(a, b))

    return TokenStep(CONSTANT, last)


def _date_pattern(samples: Sequence[Any], count: int) -> Optional[Pattern]:
    first, last = _as_date(samples[0]), _as_date(samples[-1])
    if first is None or last is None:
        return None
    span = len(samples) - 1
    days = _round_half_up(Fraction((last - first).days, span)) if span else 1
    end = last.toordinal() + days * count
    if not 1 <= end <= date.max.toordinal():
        return None
    return Pattern(DATE, start=last, step=days)


def _number_pattern(samples: Sequence[Any]) -> Optional[Pattern]:
    numbers = [_as_number(v) for v in samples]
    if any(n is None for n in numbers):
        return None
    span = len(numbers) - 1
    step = (numbers[-1] - numbers[0]) / span if span else 1.0
    if not math.isfinite(step):
        return None
    return Pattern(NUMBER, start=numbers[-1], step=step)


def _text_pattern(samples: Sequence[Any]) -> Optional[Pattern]:
    first, last = samples[0], samples[-1]
    if not isinstance(first, str) or not isinstance(last, str):
        return None
    first_tokens, last_tokens = tokenize(first), tokenize(last)
    if len(first_tokens) != len(last_tokens):
        return None

    span = len(samples) - 1
    compound = len(first_tokens) > 1
    tokens = tuple(
        _token_step(a, b, span, compound) for a, b in zip(first_tokens, last_tokens)
    )
    if all(t.kind == CONSTANT for t in tokens):
        return None
    return Pattern(TEXT, tokens=tokens)


def classify(samples: Sequence[Any], count: int = 0) -> Pattern:
    """
    Decide once how a run of seed values continues.

    Rules are tried in order: empty, date, number, structured text, cycle.
    Dates go before numbers so "2024-01-05" is never read as arithmetic.
    `count` only matters for dates: a projection past year 9999 is not a
    date pattern.
    """
    if not samples:
        return Pattern(EMPTY)
    return (
        _date_pattern(samples, count)
        or _number_pattern(samples)
        or _text_pattern(samples)
        or Pattern(CYCLE)
    )


# -------------------------
# Generation
# -------------------------
def _advance(token: TokenStep) -> TokenStep:
    if token.kind == CONSTANT:
        return token
    return token._replace(value=token.value + token.step)


def _render(token: TokenStep) -> str:
    if token.kind == CONSTANT:
        return token.value
    n = _round_half_up(token.value)
    if token.kind == DIGITS:
        text = str(n)
        return text.rjust(token.width, "0") if token.width else text
    if token.kind == LETTER:
        # no wrap past Z/z; codes stay inside 16 bits, so a long run can
        # emit lone surrogates (U+D800..U+DFFF) that won't encode to UTF-8
        return chr(n % 0x10000)
    symbols = HEAVENLY_STEMS if token.kind == STEM else CHINESE_NUMERALS
    return symbols[n % len(symbols)]


def _dates(pattern: Pattern, count: int) -> List[str]:
    out = []
    current = pattern.start
    for _ in range(count):
        current = current + timedelta(days=pattern.step)
        out.append(current.isoformat())
    return out


def _numbers(pattern: Pattern, count: int) -> List[Any]:
    out = []
    current = pattern.start
    for _ in range(count):
        current += pattern.step
        if not math.isfinite(current):
            out.append(current)
            continue
        # ties go away from zero, as in a spreadsheet
        value = float(Decimal(current).quantize(_CENTS, rounding=ROUND_HALF_UP, context=_WIDE))
        out.append(int(value) if value.is_integer() else value)
    return out


def _texts(pattern: Pattern, count: int) -> List[str]:
    out = []
    tokens = pattern.tokens
    for _ in range(count):
        tokens = tuple(_advance(t) for t in tokens)
        out.append("".join(_render(t) for t in tokens))
    return out


def predict(samples: Sequence[Any], count: int) -> List[Any]:
    """
    Continue `samples` by `count` values, starting right after the last sample.

    Numbers come back as int/float rounded to 2 decimals, dates as
    "YYYY-MM-DD" strings, text as strings. Unrecognised input is cycled.
    """
    samples = list(samples)
    count = max(int(count), 0)
    pattern = classify(samples, count)

    if pattern.kind == EMPTY:
        return [""] * count
    if pattern.kind == DATE:
        return _dates(pattern, count)
    if pattern.kind == NUMBER:
        return _numbers(pattern, count)
    if pattern.kind == TEXT:
        return _texts(pattern, count)
    return [samples[i % len(samples)] for i in range(count)]


__all__ = ["predict", "classify", "tokenize", "Pattern", "TokenStep",
           "HEAVENLY_STEMS", "CHINESE_NUMERALS"]

"""
Value formatting for the Percentile Chart Plotter.

``create_formatter`` turns a column format string, the sample's bounding
values and the label precision into a frozen ``ValueFormatter``.  The
same formatter labels x-axis ticks and tooltip values, so it is a pure
function of its fields: equal inputs give equal formatters and equal
strings.

Supported numeric patterns (a subset of .NET / Excel custom formats):

- general (``None``, ``""``, ``"G"``, ``"General"``, ``"0"``,
  ``"0.00"``, ``"#"``): display units K / M / bn / T picked from the
  bounding values
- an unquoted ``%``: percent, value × 100, no display units; ``"%"``
  and ``\\%`` are literal text
- ``,`` in the digit pattern (``"#,0"``, ``"$#,0.00"``): thousands
  grouping, no display units
- literal text around the digit pattern (``"$"``, ``"€ "``, ``" kg"``);
  ``\\`` escapes and quoted text are unescaped

Decimals always come from the precision setting, never from the
pattern.  Temporal values use .NET date tokens (``yyyy-MM-dd``) or a
raw ``strftime`` pattern.
"""

import re
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Optional

from .constants import DISPLAY_UNITS, KIND_NUMERIC, KIND_TEMPORAL, X_TICK_COUNT

_GENERAL_FORMATS = frozenset(("", "g", "general"))
_DIGIT_PATTERN = re.compile(r"[#0][#0,]*(?:\.[#0]*)?")
_QUOTED = re.compile(r'"([^"]*)"|\\(.)')
_LITERAL = re.compile(r'"([^"]*)"|\\(.)|%')

# Longest tokens first so "yyyy" wins over "yy"
_DATE_TOKENS = {
    'yyyy': '%Y',
    'yy': '%y',
    'MMMM': '%B',
    'MMM': '%b',
    'MM': '%m',
    'dd': '%d',
    'HH': '%H',
    'hh': '%I',
    'mm': '%M',
    'ss': '%S',
    'tt': '%p',
}
_DATE_TOKEN_RE = re.compile("|".join(_DATE_TOKENS))
_STANDARD_DATE_FORMATS = {
    'd': '%m/%d/%Y',
    'D': '%A, %B %d, %Y',
    'g': '%m/%d/%Y %H:%M',
    'G': '%m/%d/%Y %H:%M:%S',
    's': '%Y-%m-%dT%H:%M:%S',
}
DEFAULT_DATE_FORMAT = '%Y-%m-%d'
DEFAULT_DATETIME_FORMAT = '%Y-%m-%d %H:%M'


@dataclass(frozen=True)
class ValueFormatter:
    """Pure ``value → str`` formatter.

    Parameters
    ----------
    kind : str
        ``"numeric"`` or ``"temporal"``.
    precision : int
        Number of decimals for numeric values.
    prefix, suffix : str
        Literal text around the number (currency symbols, units).
    unit_value : float
        Display-unit divisor, ``1.0`` when no unit applies.
    unit_suffix : str
        ``"K"``, ``"M"``, ``"bn"``, ``"T"`` or ``""``.
    percent : bool
        Multiply by 100 and append ``%``.
    grouping : bool
        Insert thousands separators.
    date_format : str
        ``strftime`` pattern for temporal values.
    """
    kind: str = KIND_NUMERIC
    precision: int = 0
    prefix: str = ""
    suffix: str = ""
    unit_value: float = 1.0
    unit_suffix: str = ""
    percent: bool = False
    grouping: bool = False
    date_format: str = DEFAULT_DATE_FORMAT

    def format(self, value) -> str:
        if value is None:
            return ""
        if isinstance(value, (datetime, date)):
            return value.strftime(self.date_format)
        if self.kind == KIND_TEMPORAL:
            return str(value)

        scaled = float(value)
        if self.percent:
            scaled *= 100.0
        else:
            scaled /= self.unit_value

        sign = "-" if scaled < 0 else ""
        spec = f"{',' if self.grouping else ''}.{self.precision}f"
        digits = format(abs(scaled), spec)
        # "-0.00" reads as noise on an axis
        if sign and float(digits.replace(",", "")) == 0.0:
            sign = ""
        tail = "%" if self.percent else self.unit_suffix
        return f"{sign}{self.prefix}{digits}{tail}{self.suffix}"


# ── Pattern helpers ──────────────────────────────────────────────────────

def _literal(text: str) -> str:
    """Unescape literal text and drop bare ``%`` placeholders."""
    def repl(m):
        if m.group(1) is not None:
            return m.group(1)
        if m.group(2) is not None:
            return m.group(2)
        return ""
    return _LITERAL.sub(repl, text)


def _has_percent(text: str) -> bool:
    """``True`` for a bare ``%``; quoted or escaped ones are literal."""
    return "%" in _QUOTED.sub("", text)


def _split_pattern(format_string: str):
    """Split a numeric pattern into ``(prefix, digits, suffix, percent)``.

    Only the first section of a ``positive;negative;zero`` pattern is
    used.
    """
    section = format_string.split(";", 1)[0]
    match = _DIGIT_PATTERN.search(section)
    if match is None:
        return _literal(section), "", "", _has_percent(section)
    raw_prefix = section[:match.start()]
    raw_suffix = section[match.end():]
    percent = _has_percent(raw_prefix) or _has_percent(raw_suffix)
    return _literal(raw_prefix), match.group(), _literal(raw_suffix), percent


def choose_display_unit(value, value2=None):
    """Pick ``(divisor, suffix)`` for the larger bounding magnitude."""
    bounds = [abs(float(v)) for v in (value, value2) if v is not None]
    bound = max(bounds) if bounds else 0.0
    for unit_value, unit_suffix in DISPLAY_UNITS:
        if bound >= unit_value:
            return unit_value, unit_suffix
    return 1.0, ""


def to_strftime(format_string: str) -> str:
    """Translate a .NET-style date pattern into ``strftime`` syntax."""
    if "%" in format_string:
        return format_string
    if format_string in _STANDARD_DATE_FORMATS:
        return _STANDARD_DATE_FORMATS[format_string]
    return _DATE_TOKEN_RE.sub(lambda m: _DATE_TOKENS[m.group()], format_string)


def _default_date_format(value, value2) -> str:
    if not isinstance(value, datetime) or not isinstance(value2, datetime):
        return DEFAULT_DATE_FORMAT
    if abs(value2 - value) >= timedelta(days=1):
        return DEFAULT_DATE_FORMAT
    return DEFAULT_DATETIME_FORMAT


# ── Factory ──────────────────────────────────────────────────────────────

def create_formatter(
    format_string: Optional[str],
    value=None,
    value2=None,
    precision: int = 0,
    tick_count: int = X_TICK_COUNT,
) -> ValueFormatter:
    """Build the formatter for one chart.

    Parameters
    ----------
    format_string : str or None
        Column / user format string.
    value, value2 : number or datetime
        Bounding values of the sample (minimum and maximum), used to
        pick display units or a default date pattern.
    precision : int
        Decimals for numeric values (already clamped to ≥ 0).
    tick_count : int
        Expected number of axis ticks.  With fewer than two ticks no
        display unit is applied, since there is no range to abbreviate.
    """
    precision = max(0, int(precision))

    if isinstance(value, (datetime, date)) or isinstance(value2, (datetime, date)):
        if format_string and format_string.strip().lower() not in _GENERAL_FORMATS:
            date_format = to_strftime(format_string)
        else:
            date_format = _default_date_format(value, value2)
        return ValueFormatter(
            kind=KIND_TEMPORAL, precision=precision, date_format=date_format,
        )

    fmt = (format_string or "").strip()
    if fmt.lower() in _GENERAL_FORMATS:
        prefix, digits, suffix, percent = "", "0", "", False
    else:
        prefix, digits, suffix, percent = _split_pattern(fmt)

    grouping = "," in digits.split(".", 1)[0].rstrip(",")

    unit_value, unit_suffix = 1.0, ""
    if not percent and not grouping and tick_count > 1:
        unit_value, unit_suffix = choose_display_unit(value, value2)

    return ValueFormatter(
        kind=KIND_NUMERIC,
        precision=precision,
        prefix=prefix,
        suffix=suffix,
        unit_value=unit_value,
        unit_suffix=unit_suffix,
        percent=percent,
        grouping=grouping,
    )

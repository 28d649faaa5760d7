"""
CSV parser for the Percentile Chart Plotter.

Loads one sample file into a ``SampleDataset``.  The header row names
the columns; the first column is the category column and an optional
second column is the values column.  Handles:

- Auto-detected delimiters (tab → semicolon → comma)
- European locale decimal-comma parsing
- UTF-8 BOM markers and ``#`` comment lines
- ISO 8601 dates and datetimes (temporal samples)
- Optional format-string declaration in the header, e.g.
  ``Revenue [$#,0]``

Unparseable cells are kept as raw text rather than dropped, so the
validator rejects the whole sample.  Those in the sampled column (the
values column when present) are reported with ``warnings.warn``.
"""

import csv
import math
import os
import re
import warnings
from datetime import date, datetime
from typing import List, Optional, Tuple

from .constants import COL_CATEGORY, COL_VALUES
from .data_model import ColumnData, ColumnMetadata, SampleDataset

_HEADER_FORMAT = re.compile(r"^(?P<name>.*?)\s*\[(?P<fmt>[^\]]*)\]\s*$")
_ISO_DATE = re.compile(r"^\d{4}-\d{2}-\d{2}$")
_ISO_DATETIME = re.compile(r"^\d{4}-\d{2}-\d{2}[T ]\d{2}:\d{2}")


# ── Locale-safe cell parsing ─────────────────────────────────────────────

def _locale_float(text: str) -> float:
    """Parse a numeric string that may use comma as decimal separator.

    Handles ``"3.14"``, ``"3,14"``, ``"1.234,56"`` and ``"1,234.56"``.
    Raises ``ValueError`` for non-numeric or non-finite strings.
    """
    s = text.strip()
    if not s:
        raise ValueError("empty string")
    if ',' in s and '.' in s:
        if s.rfind(',') > s.rfind('.'):
            s = s.replace('.', '').replace(',', '.')
        else:
            s = s.replace(',', '')
    elif ',' in s:
        s = s.replace(',', '.')
    result = float(s)
    if not math.isfinite(result):
        raise ValueError(f"non-finite value: {text.strip()!r}")
    return result


def _parse_cell(text: str):
    """Number, ``date``/``datetime``, or ``ValueError``."""
    s = text.strip()
    if _ISO_DATE.match(s):
        return date.fromisoformat(s)
    if _ISO_DATETIME.match(s):
        return datetime.fromisoformat(s.replace('Z', '+00:00'))
    value = _locale_float(s)
    if value.is_integer() and re.fullmatch(r"[+-]?\d+", s):
        return int(value)
    return value


# ── Delimiter auto-detection ─────────────────────────────────────────────

def _detect_delimiter(sample_line: str) -> str:
    """Priority: tab → semicolon → comma."""
    if '\t' in sample_line:
        return '\t'
    if ';' in sample_line:
        return ';'
    return ','


def _split_line(line: str, delimiter: str) -> List[str]:
    rows = list(csv.reader([line], delimiter=delimiter))
    if rows:
        return [t.strip() for t in rows[0]]
    return []


def _parse_header_cell(cell: str) -> ColumnMetadata:
    """``"Revenue [$#,0]"`` → name ``Revenue``, format ``$#,0``."""
    match = _HEADER_FORMAT.match(cell)
    if match:
        return ColumnMetadata(
            display_name=match.group('name') or None,
            format_string=match.group('fmt') or None,
        )
    return ColumnMetadata(display_name=cell or None)


# ── Loader ───────────────────────────────────────────────────────────────

def load_sample_csv(filepath: str) -> SampleDataset:
    """Load a one- or two-column sample CSV.

    Parameters
    ----------
    filepath : str
        Path to the CSV file.

    Returns
    -------
    SampleDataset

    Raises
    ------
    FileNotFoundError
        If *filepath* does not exist.
    ValueError
        If the file has no header or no data rows.
    """
    if not os.path.isfile(filepath):
        raise FileNotFoundError(f"Sample CSV not found: {filepath}")

    name = os.path.basename(filepath)

    raw_lines: List[str] = []
    with open(filepath, 'r', encoding='utf-8-sig') as fh:
        for line in fh:
            stripped = line.rstrip('\n\r')
            if stripped.strip() == '' or stripped.strip().startswith('#'):
                continue
            raw_lines.append(stripped)

    if len(raw_lines) < 2:
        raise ValueError(
            f"CSV file '{name}' must have at least a header row and one "
            f"data row."
        )

    delimiter = _detect_delimiter(raw_lines[0])
    header = _split_line(raw_lines[0], delimiter)
    n_columns = min(len(header), COL_VALUES + 1)
    if n_columns == 0:
        raise ValueError(f"CSV header in '{name}' is empty.")

    columns: List[list] = [[] for _ in range(n_columns)]
    bad_tokens: List[str] = []
    # Only the sampled column has to be numeric or temporal
    sampled_col = COL_VALUES if n_columns > COL_VALUES else COL_CATEGORY

    for line_idx, raw_line in enumerate(raw_lines[1:], start=2):
        tokens = _split_line(raw_line, delimiter)
        for col in range(n_columns):
            cell = tokens[col] if col < len(tokens) else ""
            if not cell:
                # Missing cell: the host would hand over a null
                columns[col].append(None)
                if col == sampled_col:
                    bad_tokens.append(f"line {line_idx} col {col + 1}: blank")
                continue
            try:
                columns[col].append(_parse_cell(cell))
            except ValueError:
                columns[col].append(cell)
                if col == sampled_col:
                    bad_tokens.append(f"line {line_idx} col {col + 1}: '{cell}'")

    if bad_tokens:
        detail = "; ".join(bad_tokens[:10])
        if len(bad_tokens) > 10:
            detail += f" ... and {len(bad_tokens) - 10} more"
        warnings.warn(
            f"Unusable cells in '{name}': {detail}. The chart will show "
            f"an invalid-data message until they are fixed.",
            stacklevel=2,
        )

    category = ColumnData(
        metadata=_parse_header_cell(header[COL_CATEGORY]),
        values=tuple(columns[COL_CATEGORY]),
    )
    values: Optional[ColumnData] = None
    if n_columns > COL_VALUES:
        values = ColumnData(
            metadata=_parse_header_cell(header[COL_VALUES]),
            values=tuple(columns[COL_VALUES]),
        )

    return SampleDataset(category=category, values=values)


def sample_summary(dataset: SampleDataset) -> Tuple[str, int]:
    """``(column name, row count)`` for status messages."""
    column = dataset.values if dataset.values is not None else dataset.category
    if column is None:
        return "", 0
    return column.metadata.display_name or "", len(column.values)

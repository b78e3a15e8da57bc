"""
Tabular Record Parser

Tokenizes tab-delimited text into a header row and a grid of data rows.
Blank lines are ignored, header names are kept verbatim and data cells are
trimmed of surrounding whitespace.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import math

from ..exceptions import EmptyResource, MissingColumn

FIELD_DELIMITER = "\t"
LINE_DELIMITER = "\n"


@dataclass
class TabularRecords:
    """Parsed header and data rows of one tabular resource."""
    headers: List[str]
    rows: List[List[str]] = field(default_factory=list)

    def column_index(self, name: str) -> int:
        """
        Resolve a column name to its position in the header.

        Args:
            name: Exact column name (no case folding, no trimming)

        Returns:
            Zero-based column index

        Raises:
            MissingColumn: If no header cell equals ``name``
        """
        try:
            return self.headers.index(name)
        except ValueError:
            raise MissingColumn(name) from None

    def optional_column_index(self, name: Optional[str]) -> Optional[int]:
        """Resolve ``name`` if one is configured, otherwise return None."""
        if not name:
            return None
        return self.column_index(name)

    def __len__(self) -> int:
        return len(self.rows)


def cell(row: List[str], index: int) -> Optional[str]:
    """Return the cell at ``index``, or None for a short row."""
    if index >= len(row):
        return None
    return row[index]


def parse_number(token: Optional[str]) -> Optional[float]:
    """Parse a numeric cell; unparseable or non-finite tokens are absent data."""
    if token is None or token == "":
        return None
    try:
        value = float(token)
    except ValueError:
        return None
    if not math.isfinite(value):
        return None
    return value


def parse_tabular(text: str, source: Optional[str] = None) -> TabularRecords:
    """
    Split delimited text into header and rows.

    Args:
        text: UTF-8 decoded resource body
        source: Resource name used in error messages

    Returns:
        TabularRecords with the first non-blank line as header

    Raises:
        EmptyResource: If the text holds no non-blank line
    """
    # Only \n ends a row; other Unicode line breaks stay inside their cell
    lines = [line.removesuffix("\r") for line in text.split(LINE_DELIMITER)]
    lines = [line for line in lines if line.strip()]
    if not lines:
        raise EmptyResource(source)

    headers = lines[0].split(FIELD_DELIMITER)
    rows = [
        [value.strip() for value in line.split(FIELD_DELIMITER)]
        for line in lines[1:]
    ]
    return TabularRecords(headers=headers, rows=rows)

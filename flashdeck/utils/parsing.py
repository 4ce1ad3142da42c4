"""Text parsing utilities for consistent cell handling across importers."""

import math
from typing import Any, List


class TextParser:
    """
    Centralized cell and line parsing utilities.

    Both importers go through these helpers so a spreadsheet cell and a
    CSV field with the same content produce the same card text.
    """

    LINE_SEPARATOR = "\n"
    FIELD_SEPARATOR = ","

    @classmethod
    def cell_to_text(cls, value: Any) -> str:
        """
        Stringify and trim a single cell.

        Empty cells (None, NaN) become "". Integral floats drop their
        ``.0`` and booleans are lower-cased, matching how spreadsheet
        apps display them.

        Args:
            value: Raw cell value

        Returns:
            Trimmed text
        """
        if value is None:
            return ""
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, float):
            if math.isnan(value):
                return ""
            if value.is_integer():
                return str(int(value))
        return str(value).strip()

    @classmethod
    def split_lines(cls, text: str) -> List[str]:
        """Split raw text into lines on ``\\n`` only (``\\r`` is left for trimming)."""
        if not text:
            return [""]
        return text.split(cls.LINE_SEPARATOR)

    @classmethod
    def split_fields(cls, line: str) -> List[str]:
        """Split a line on commas. Quoting and escaping are not supported."""
        return line.split(cls.FIELD_SEPARATOR)

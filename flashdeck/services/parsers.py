"""
Tabular parsers - turn spreadsheet or CSV content into flashcards.

Both variants share one row contract: columns 0-3 map to kanji,
phonetic, meaning and example; the first row is a header; rows without
a kanji or a meaning are dropped.
"""

import io
import logging
from typing import Any, Iterable, List, Sequence

import pandas as pd

from ..config import Config
from ..models import FlashCard
from ..utils.parsing import TextParser
from .errors import MalformedFileError

logger = logging.getLogger(__name__)

KANJI, PHONETIC, MEANING, EXAMPLE = range(len(Config.COLUMNS))

OLE2_SIGNATURE = b"\xd0\xcf\x11\xe0\xa1\xb1\x1a\xe1"
ZIP_SIGNATURE = b"PK\x03\x04"


def _column(row: Sequence[Any], index: int) -> str:
    if index >= len(row):
        return ""
    return TextParser.cell_to_text(row[index])


def rows_to_cards(rows: Iterable[Sequence[Any]]) -> List[FlashCard]:
    """
    Map data rows (header already removed) to cards.

    Ids are the 0-based row positions before filtering, so a dropped
    row leaves a gap instead of renumbering the rest.

    Args:
        rows: Data rows as sequences of raw cell values

    Returns:
        Cards in source order, invalid rows removed
    """
    cards = []
    for index, row in enumerate(rows):
        card = FlashCard(
            id=index,
            kanji=_column(row, KANJI),
            phonetic=_column(row, PHONETIC),
            meaning=_column(row, MEANING),
            example=_column(row, EXAMPLE),
        )
        if card.is_valid:
            cards.append(card)
    return cards


def parse_delimited(data: bytes) -> List[FlashCard]:
    """
    Parse comma-separated text.

    Args:
        data: Raw file content, UTF-8 (a leading BOM is ignored)

    Returns:
        Parsed cards

    Raises:
        MalformedFileError: If the content is not valid UTF-8
    """
    try:
        text = data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedFileError(detail=str(e)) from e

    lines = TextParser.split_lines(text)[1:]
    cards = rows_to_cards(TextParser.split_fields(line) for line in lines)
    logger.debug("Parsed %d of %d CSV line(s)", len(cards), len(lines))
    return cards


def workbook_engine(data: bytes) -> str:
    """
    Pick the pandas reader from the file signature, not the extension.

    Legacy .xls workbooks are OLE2 compound files read by xlrd; .xlsx
    workbooks are zip archives read by openpyxl.

    Raises:
        MalformedFileError: If the bytes are neither
    """
    if data.startswith(OLE2_SIGNATURE):
        return "xlrd"
    if data.startswith(ZIP_SIGNATURE):
        return "openpyxl"
    raise MalformedFileError(detail="not an Excel workbook")


def parse_spreadsheet(data: bytes) -> List[FlashCard]:
    """
    Parse the first sheet of an Excel workbook.

    Blank rows inside the sheet are kept as rows, so they still use up
    an id.

    Args:
        data: Raw workbook bytes (.xlsx or .xls)

    Returns:
        Parsed cards

    Raises:
        MalformedFileError: If the workbook cannot be opened
    """
    engine = workbook_engine(data)
    try:
        df = pd.read_excel(io.BytesIO(data), sheet_name=0, header=None, dtype=object, engine=engine)
    except Exception as e:
        raise MalformedFileError(detail=str(e)) from e

    rows = df.values.tolist()[1:]
    cards = rows_to_cards(rows)
    logger.debug("Parsed %d of %d spreadsheet row(s)", len(cards), len(rows))
    return cards

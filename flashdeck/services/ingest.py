"""File ingestor - detects the format of an imported file and parses it."""

import logging
import mimetypes
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from ..config import Config
from ..models import FlashCard
from .errors import MalformedFileError, UnsupportedFormatError
from .parsers import parse_delimited, parse_spreadsheet

logger = logging.getLogger(__name__)


class FileFormat(Enum):
    """Supported input formats."""
    EXCEL = "excel"
    CSV = "csv"


@dataclass
class SourceFile:
    """
    A user-supplied file: a name, a MIME type and its content.

    Content comes either from ``data`` or from ``path`` on disk.
    """

    name: str
    mime_type: str = ""
    path: Optional[Path] = None
    data: Optional[bytes] = None

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "SourceFile":
        """Describe a file on disk, guessing its MIME type from the name."""
        path = Path(path)
        mime_type, _ = mimetypes.guess_type(path.name)
        return cls(name=path.name, mime_type=mime_type or "", path=path)

    def read_bytes(self) -> bytes:
        """
        Read the whole content.

        Raises:
            MalformedFileError: If nothing can be read
        """
        if self.data is not None:
            return self.data
        if self.path is None:
            raise MalformedFileError(detail=f"{self.name} has no content")
        try:
            return self.path.read_bytes()
        except OSError as e:
            raise MalformedFileError(detail=str(e)) from e


def _has_extension(name: str, extensions) -> bool:
    return name.lower().endswith(tuple(extensions))


def classify(name: str, mime_type: str = "") -> FileFormat:
    """
    Detect the file format. Spreadsheet signatures win over CSV ones.

    Args:
        name: File name
        mime_type: MIME type reported for the file, may be empty

    Returns:
        The detected format

    Raises:
        UnsupportedFormatError: If neither format matches
    """
    if mime_type in Config.EXCEL_MIME_TYPES or _has_extension(name, Config.EXCEL_EXTENSIONS):
        return FileFormat.EXCEL
    if mime_type == Config.CSV_MIME_TYPE or _has_extension(name, Config.CSV_EXTENSIONS):
        return FileFormat.CSV
    raise UnsupportedFormatError(detail=f"{name} ({mime_type or 'unknown type'})")


def is_supported(name: str, mime_type: str = "") -> bool:
    """Check the format without raising."""
    try:
        classify(name, mime_type)
    except UnsupportedFormatError:
        return False
    return True


PARSERS: Dict[FileFormat, Callable[[bytes], List[FlashCard]]] = {
    FileFormat.EXCEL: parse_spreadsheet,
    FileFormat.CSV: parse_delimited,
}


def ingest(source: SourceFile) -> List[FlashCard]:
    """
    Classify, read and parse a file.

    Args:
        source: File to import

    Returns:
        Parsed cards (possibly empty)

    Raises:
        UnsupportedFormatError: Unknown format, nothing is read
        MalformedFileError: Read or decode failure
    """
    file_format = classify(source.name, source.mime_type)
    cards = PARSERS[file_format](source.read_bytes())
    logger.info("Loaded %d %s card(s) from %s", len(cards), file_format.value, source.name)
    return cards

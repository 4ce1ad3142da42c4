"""Errors raised while importing vocabulary files."""


class FlashcardError(Exception):
    """Base error carrying a message suitable for showing to the user."""

    default_message = "Something went wrong."

    def __init__(self, message: str = "", detail: str = ""):
        self.message = message or self.default_message
        self.detail = detail
        super().__init__(f"{self.message} ({detail})" if detail else self.message)


class UnsupportedFormatError(FlashcardError):
    """File is neither a spreadsheet nor a CSV."""

    default_message = "Please choose an Excel (.xlsx, .xls) or CSV (.csv) file."


class MalformedFileError(FlashcardError):
    """File could not be read or decoded."""

    default_message = "Could not read the file. Please check its format."

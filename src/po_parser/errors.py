"""
Exceptions raised by the I/O adapters around the parsing core.
"""


class POParserError(Exception):
    """Base class for pipeline failures."""


class DocumentExtractionError(POParserError):
    """A PDF could not be rendered or read."""


class SheetWriteError(POParserError):
    """Rows could not be appended to the target sheet."""

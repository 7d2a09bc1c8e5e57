class WenhengError(Exception):
    """Base exception for Wenheng service."""


class ExtractionError(WenhengError):
    """Raised inside the extractor when a document cannot be decoded or rendered."""


class MissingInputError(WenhengError):
    """Raised when a required submission field (topic, essay) is absent."""


class UnsupportedFormatError(WenhengError):
    """Raised when an uploaded essay document is neither PDF, image nor text."""

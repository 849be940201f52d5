# src/reader_kit/errors.py

"""Exception hierarchy for reader-kit.

Failures are confined to boundary collaborators (decoding, the book store,
the text service) and to the selection bridge. Segmentation and navigation
are total over well-formed input and never raise these.
"""


class ReaderKitError(Exception):
    """Base class for all reader-kit errors."""


class DecodeError(ReaderKitError):
    """Raw bytes could not be decoded with the requested encoding."""

    def __init__(self, encoding: str, reason: str) -> None:
        super().__init__(f"Cannot decode content as {encoding}: {reason}")
        self.encoding = encoding
        self.reason = reason


class SelectionError(ReaderKitError):
    """A selection could not be turned into a bookmark."""


class UnanchorableSelectionError(SelectionError):
    """The selection did not start inside a known paragraph."""


class EmptySelectionError(SelectionError):
    """The selection contains no text worth keeping."""


class PositionOutOfRangeError(ReaderKitError, IndexError):
    """A chapter or paragraph index lies outside the current document."""


class StoreError(ReaderKitError):
    """A book store operation failed."""


class BookNotFoundError(ReaderKitError, KeyError):
    """No book with the given id exists in the library."""


class BookmarkNotFoundError(ReaderKitError, KeyError):
    """No bookmark with the given id exists on the book."""


class TextServiceError(ReaderKitError):
    """The generative text service could not produce a result."""


class EmptyCompletionError(TextServiceError):
    """The model finished without returning any text."""

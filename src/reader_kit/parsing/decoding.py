# parsing/decoding.py

"""Bytes-to-text decoding for imported books.

Decoding is strict: a book is either decoded correctly or the caller gets a
DecodeError, never silently corrupted text.
"""

import codecs
import logging

from reader_kit.errors import DecodeError

logger = logging.getLogger(__name__)

DEFAULT_ENCODING = "utf-8"
FALLBACK_ENCODING = "gbk"
SUPPORTED_ENCODINGS = (DEFAULT_ENCODING, FALLBACK_ENCODING)


def decode(data: bytes, encoding: str) -> str:
    """Decode `data` strictly, dropping a leading UTF-8 byte order mark."""
    try:
        codec = codecs.lookup(encoding)
    except LookupError:
        raise DecodeError(encoding, "unknown encoding") from None

    name = "utf-8-sig" if codec.name == "utf-8" else codec.name
    try:
        return data.decode(name, errors="strict")
    except UnicodeDecodeError as exc:
        logger.warning("Failed to decode %d bytes as %s: %s", len(data), encoding, exc)
        raise DecodeError(encoding, str(exc)) from exc


def detect_encoding(data: bytes) -> str:
    """Pick UTF-8 when the bytes are valid UTF-8, GBK otherwise."""
    try:
        data.decode(DEFAULT_ENCODING, errors="strict")
    except UnicodeDecodeError:
        logger.debug("Content is not valid UTF-8, assuming %s", FALLBACK_ENCODING)
        return FALLBACK_ENCODING
    return DEFAULT_ENCODING

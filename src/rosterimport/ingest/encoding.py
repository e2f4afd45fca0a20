"""Encoding resolver: UTF-8 first, Windows-1252 when UTF-8 clearly failed."""

from __future__ import annotations

import codecs
import logging

from rosterimport.core.protocols import IUploadedFile

logger = logging.getLogger(__name__)

REPLACEMENT_CHAR = "\ufffd"
LEGACY_ENCODING = "cp1252"

_C1_PASSTHROUGH = "rosterimport.c1passthrough"


def _c1_passthrough(exc: UnicodeError) -> tuple[str, int]:
    # cp1252 leaves 0x81, 0x8D, 0x8F, 0x90 and 0x9D undefined; browsers decode
    # them as the C1 control with the same code point.
    if not isinstance(exc, UnicodeDecodeError):
        raise exc
    raw = exc.object[exc.start:exc.end]
    return "".join(chr(b) for b in raw), exc.end


codecs.register_error(_C1_PASSTHROUGH, _c1_passthrough)


def decode_bytes(data: bytes, fallback_encoding: str = LEGACY_ENCODING) -> str:
    """Decode as UTF-8, or as ``fallback_encoding`` if that yields U+FFFD."""
    text = data.decode("utf-8-sig", errors="replace")
    if REPLACEMENT_CHAR not in text:
        return text
    logger.info("UTF-8 decode produced replacement characters; re-decoding as %s", fallback_encoding)
    return data.decode(fallback_encoding, errors=_C1_PASSTHROUGH)


def resolve_text(source: IUploadedFile, fallback_encoding: str = LEGACY_ENCODING) -> str:
    """Read an upload once and return its text.

    Best effort: a file in some third encoding still comes back decoded as
    ``fallback_encoding``. There is no error path for unknown encodings.
    """
    return decode_bytes(source.read(), fallback_encoding)

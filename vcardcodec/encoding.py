"""Value transcoding between Unicode text and the on-wire property value.

The wire value is kept as a ``str``; its bytes are taken in DEFAULT_ENCODING
whenever a transfer encoding or charset has to be undone.
"""

from __future__ import annotations

import base64
import binascii
import quopri

from .errors import UnknownCharset, UnsupportedEncodingKind
from .utils import split_parameters

DEFAULT_ENCODING = "utf-8"

QUOTED_PRINTABLE = "quoted-printable"
BASE64_NAMES = ("b", "base64")


def _to_bytes(value: str, charset: str) -> bytes:
    try:
        return value.encode(charset, errors="replace")
    except LookupError as exc:
        raise UnknownCharset(charset) from exc


def _to_text(data: bytes, charset: str) -> str:
    try:
        return data.decode(charset, errors="replace")
    except LookupError as exc:
        raise UnknownCharset(charset) from exc


def quoted_printable_encode(data: bytes) -> str:
    """Quoted-printable encode data as a single unbroken line.

    Line breaks in the data are escaped (``=0D=0A``) and no soft line breaks
    are left in the result; long values are folded separately.
    """
    encoded = binascii.b2a_qp(data, quotetabs=False, istext=False)
    return encoded.replace(b"=\r\n", b"").replace(b"=\n", b"").decode("ascii")


def encode_value(version: str, charset: str, value: str) -> str:
    """Encode value for a card of the given version.

    vCard 3.0 dropped the QUOTED-PRINTABLE encoding, so there the value is only
    transcoded through charset. Older versions get quoted-printable over the
    charset's bytes.
    """
    data = _to_bytes(value, charset)
    if version.startswith("3"):
        return _to_text(data, DEFAULT_ENCODING)
    return quoted_printable_encode(data)


def decode_value(value: str, parameters: str) -> str:
    """Undo the ENCODING and CHARSET declared in parameters."""
    encoding = None
    charset = None
    for token in split_parameters(parameters):
        if token["value"] is None:
            continue
        if token["key"] == "encoding":
            encoding = token["value"].lower()
        elif token["key"] == "charset":
            charset = token["value"].lower()

    data = value.encode(DEFAULT_ENCODING, errors="replace")
    if encoding is not None:
        if encoding == QUOTED_PRINTABLE:
            data = quopri.decodestring(data)
        elif encoding in BASE64_NAMES:
            data = base64.b64decode(data)
        else:
            raise UnsupportedEncodingKind(encoding)

    return _to_text(data, charset if charset is not None else DEFAULT_ENCODING)


__all__ = [
    "DEFAULT_ENCODING",
    "quoted_printable_encode",
    "encode_value",
    "decode_value",
]

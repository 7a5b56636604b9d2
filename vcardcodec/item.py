from __future__ import annotations

import logging

from .encoding import decode_value, encode_value
from .models import CardContext
from .utils import fold_data, need_encode, split_parameters

logger = logging.getLogger(__name__)

# Recomputed by set_decoded_value, never carried over.
MANAGED_PARAMETERS = {"encoding", "charset"}

V3_CHARSET = "utf-8"


class Item:
    """A single ``NAME;PARAMETERS:value`` line of a vCard.

    ``value`` holds the encoded, unfolded wire value. When it is assigned
    directly the caller must also keep the ENCODING= and CHARSET= entries of
    ``parameters_string`` right; ``set_decoded_value`` does both.
    """

    def __init__(
        self,
        name: str,
        parameters: str = "",
        value: str = "",
        *,
        fold_long_lines: bool = True,
    ) -> None:
        self._name = name
        self.parameters_string = parameters
        self.value = value
        self.fold_long_lines = fold_long_lines

    @property
    def name(self) -> str:
        return self._name

    def set_decoded_value(self, value: str, context: CardContext = CardContext()) -> None:
        """Encode value as the card's version requires and store it.

        RFC 2426 removed QUOTED-PRINTABLE, so version 3 cards only get a
        CHARSET=utf-8 marker for non-ASCII text. Older cards get
        ENCODING=QUOTED-PRINTABLE with the card charset when the value has
        8-bit or control characters.
        """
        tokens = [
            t["raw"]
            for t in split_parameters(self.parameters_string)
            if t["key"] not in MANAGED_PARAMETERS
        ]

        if context.is_version3:
            if not value.isascii():
                tokens.append(f"CHARSET={V3_CHARSET}")
            encoded = encode_value(context.version, V3_CHARSET, value)
            logger.debug("%s: version %s text", self._name, context.version)
        elif need_encode(value):
            tokens.append("ENCODING=QUOTED-PRINTABLE")
            tokens.append(f"CHARSET={context.charset}")
            encoded = encode_value(context.version, context.charset, value)
            logger.debug("%s: quoted-printable under %s", self._name, context.charset)
        else:
            encoded = value

        self.parameters_string = ";".join(tokens)
        self.value = encoded

    @property
    def decoded_value(self) -> str:
        """The value with ENCODING and CHARSET from the parameters undone.

        Backslash escapes (``\\n``, ``\\,``, ``\\;``) are left alone since
        structured values such as N or ADR use ``;`` as a separator; see
        ``utils.unescape_text`` for free-text properties.
        """
        return decode_value(self.value, self.parameters_string)

    def to_item_string(self) -> str:
        value = fold_data(self.value) if self.fold_long_lines else self.value
        if self.parameters_string:
            return f"{self._name};{self.parameters_string}:{value}"
        return f"{self._name}:{value}"

    def __repr__(self) -> str:
        return f"Item({self._name!r}, {self.parameters_string!r}, {self.value!r})"


__all__ = ["Item", "MANAGED_PARAMETERS"]

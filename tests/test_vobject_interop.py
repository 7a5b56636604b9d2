"""Lines produced by Item must read back the same through vobject."""

import vobject

from vcardcodec.item import Item
from vcardcodec.models import CardContext
from vcardcodec.utils import CRLF, FOLD_MARKER


def card(version: str, *lines: str) -> str:
    return CRLF.join(["BEGIN:VCARD", f"VERSION:{version}", *lines, "END:VCARD"]) + CRLF


def test_version3_folded_note_reads_back():
    text = ("Zoë Ångström wrote a rather long note that needs more than one line " * 3).strip()
    item = Item("NOTE")
    item.set_decoded_value(text, CardContext(version="3.0"))
    line = item.to_item_string()
    assert FOLD_MARKER in line

    v = vobject.readOne(card("3.0", "FN:Zoe", line))
    assert v.note.value == text


def test_version21_quoted_printable_reads_back():
    item = Item("NOTE")
    item.set_decoded_value("Café crème", CardContext(version="2.1", charset="utf-8"))
    assert item.parameters_string == "ENCODING=QUOTED-PRINTABLE;CHARSET=utf-8"

    v = vobject.readOne(card("2.1", "FN:Zoe", item.to_item_string()))
    assert v.note.value == "Café crème"


def test_extra_parameters_survive():
    item = Item("EMAIL", "TYPE=WORK")
    item.set_decoded_value("john.doe@example.com", CardContext(version="3.0"))

    v = vobject.readOne(card("3.0", "FN:John Doe", item.to_item_string()))
    assert v.email.value == "john.doe@example.com"
    assert v.email.params["TYPE"] == ["WORK"]

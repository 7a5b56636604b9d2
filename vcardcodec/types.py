from __future__ import annotations

from typing import TypedDict


class ParameterToken(TypedDict):
    raw: str
    key: str
    value: str | None


class EncodedItem(TypedDict):
    name: str
    parameters: str
    value: str
    line: str


class DecodedItem(TypedDict):
    name: str
    value: str


__all__ = [
    "ParameterToken",
    "EncodedItem",
    "DecodedItem",
]

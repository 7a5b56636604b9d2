class CodecError(ValueError):
    """Base class for property value encode/decode failures."""


class UnsupportedEncodingKind(CodecError):
    def __init__(self, encoding: str):
        super().__init__(f"Unknown data encoding '{encoding}'")
        self.encoding = encoding


class UnknownCharset(CodecError, LookupError):
    def __init__(self, charset: str):
        super().__init__(f"Unknown charset '{charset}'")
        self.charset = charset


__all__ = [
    "CodecError",
    "UnsupportedEncodingKind",
    "UnknownCharset",
]

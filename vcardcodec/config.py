import os

from .models import CardContext

DEFAULT_VERSION = os.environ.get("VCARDCODEC_VERSION", "3.0")
DEFAULT_CHARSET = os.environ.get("VCARDCODEC_CHARSET", "utf-8")
LOG_LEVEL = os.environ.get("VCARDCODEC_LOG_LEVEL", "INFO").upper()


def default_context() -> CardContext:
    return CardContext(version=DEFAULT_VERSION, charset=DEFAULT_CHARSET)

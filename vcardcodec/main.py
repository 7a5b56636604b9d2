import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from .config import LOG_LEVEL, default_context
from .errors import CodecError
from .item import Item
from .models import CardContext
from .types import DecodedItem, EncodedItem
from .utils import escape_text, unescape_text, unfold_data

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(levelname)s: %(message)s"))

logger = logging.getLogger("vcardcodec")
logger.setLevel(LOG_LEVEL)
logger.addHandler(_handler)

app = FastAPI()


class EncodeRequest(BaseModel):
    name: str
    value: str
    parameters: str = ""
    version: Optional[str] = None
    charset: Optional[str] = None
    fold: bool = True
    escape: bool = False


class DecodeRequest(BaseModel):
    value: str
    name: str = ""
    parameters: str = ""
    unescape: bool = False


@app.exception_handler(CodecError)
async def codec_error(request: Request, exc: CodecError):
    logger.info("%s %s rejected: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/encode")
async def encode(body: EncodeRequest):
    defaults = default_context()
    context = CardContext(
        version=body.version or defaults.version,
        charset=body.charset or defaults.charset,
    )
    item = Item(body.name, body.parameters, fold_long_lines=body.fold)
    value = escape_text(body.value) if body.escape else body.value
    item.set_decoded_value(value, context)
    result: EncodedItem = {
        "name": item.name,
        "parameters": item.parameters_string,
        "value": item.value,
        "line": item.to_item_string(),
    }
    return result


@app.post("/decode")
async def decode(body: DecodeRequest):
    item = Item(body.name, body.parameters, unfold_data(body.value))
    value = item.decoded_value
    result: DecodedItem = {
        "name": item.name,
        "value": unescape_text(value) if body.unescape else value,
    }
    return result

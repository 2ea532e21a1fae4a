import email.policy
import json
import logging
from email.parser import BytesParser
from typing import Any
from urllib.parse import parse_qsl

import httpx

from .models import Blob, FetchResponse, FormData
from .types import ResponseType

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"
FORM_URLENCODED = "application/x-www-form-urlencoded"
MULTIPART_FORM_DATA = "multipart/form-data"


def media_type(content_type: str | None) -> str:
    if not content_type:
        return ""
    return content_type.split(";", 1)[0].strip().lower()


def resolve_response_type(
    response: httpx.Response, declared: ResponseType | None = None
) -> ResponseType | None:
    """Pick the decoding strategy: the declared type, else JSON by content-type.

    ``None`` means no type signal at all; the body is handed back unparsed.
    """
    if declared:
        return declared
    if media_type(response.headers.get("content-type")) == JSON_CONTENT_TYPE:
        return "json"
    return None


def parse_form_data(content: bytes, content_type: str | None) -> FormData:
    kind = media_type(content_type)
    form = FormData()

    if kind == FORM_URLENCODED:
        for name, value in parse_qsl(content.decode("utf-8"), keep_blank_values=True):
            form.append(name, value)
        return form

    if kind != MULTIPART_FORM_DATA:
        raise ValueError(f"Cannot decode {kind or 'untyped'} body as form data")

    head = f"Content-Type: {content_type}\r\n\r\n".encode("latin-1")
    message = BytesParser(policy=email.policy.HTTP).parsebytes(head + content)
    if not message.is_multipart():
        raise ValueError("Malformed multipart body")

    for part in message.iter_parts():
        name = part.get_param("name", header="content-disposition")
        if name is None:
            raise ValueError("Multipart part without a field name")
        payload = part.get_payload(decode=True) or b""
        filename = part.get_filename()
        if filename is None:
            form.append(name, payload.decode(part.get_content_charset() or "utf-8"))
        else:
            form.append(name, payload, filename=filename, content_type=part.get_content_type())
    return form


def decode_body(response: httpx.Response, response_type: ResponseType) -> Any:
    content = response.content
    if response_type == "arraybuffer":
        return content
    if response_type == "json":
        return json.loads(content)
    if response_type == "text":
        return response.text
    if response_type == "formdata":
        return parse_form_data(content, response.headers.get("content-type"))
    if response_type == "blob":
        return Blob(content, response.headers.get("content-type", ""))
    raise ValueError(f"Unsupported response type: {response_type!r}")


async def parse_response(
    response: httpx.Response, response_type: ResponseType | None = None
) -> FetchResponse:
    resolved = resolve_response_type(response, response_type)

    if resolved is None or resolved == "stream":
        data: Any = response.aiter_bytes()
    else:
        await response.aread()
        if not response.content and resolved in ("json", "formdata"):
            # nothing to decode, e.g. HEAD or 204 responses
            data = response.content
        else:
            try:
                data = decode_body(response, resolved)
            except (ValueError, LookupError) as exc:
                logger.warning(f"Failed to decode response body as {resolved}, returning raw body: {exc}")
                data = response.content

    return FetchResponse(
        data=data,
        status=response.status_code,
        status_text=response.reason_phrase,
        headers=response.headers,
    )

# app/services/proxy.py
import base64
import json
import logging
from typing import Any, Callable, Optional

from app.models import InboundRequest, OutboundResponse
from app.services import gemini
from app.services.errors import (
    ConfigurationMissing,
    MethodNotAllowed,
    ParseError,
    UnhandledFailure,
    to_response,
)
from app.services.result import Result

log = logging.getLogger(__name__)


def parse_prompt(body: str, base64_encoded: bool = False) -> Result:
    """Decode the request body and take its `prompt` field, unvalidated.

    Any JSON value other than null is accepted; non-objects have no prompt.
    """
    try:
        # binascii.Error and UnicodeDecodeError are both ValueErrors
        raw = base64.b64decode(body, validate=True).decode("utf-8") if base64_encoded else body
        data = json.loads(raw)
    except ValueError as e:
        return Result.err(ParseError(str(e)))
    if data is None:
        return Result.err(ParseError("Cannot read property 'prompt' of null"))
    return Result.ok(data.get("prompt") if isinstance(data, dict) else None)


def _proxy(request: InboundRequest, api_key: Optional[str], post: Optional[Callable[..., Any]]) -> Result:
    if request.httpMethod != "POST":
        return Result.err(MethodNotAllowed())
    if not api_key:
        log.error("GEMINI_API_KEY environment variable is not set.")
        return Result.err(ConfigurationMissing())

    prompt = parse_prompt(request.body, request.isBase64Encoded)
    if prompt.is_err:
        return prompt
    reply = gemini.generate(prompt.value, api_key, post=post)
    if reply.is_err:
        return reply
    return gemini.extract_text(reply.value)


def handle(
    request: InboundRequest,
    api_key: Optional[str],
    post: Optional[Callable[..., Any]] = None,
) -> OutboundResponse:
    """
    Forward one prompt to Gemini and translate the outcome to a status + JSON body.
    `api_key` is supplied by the hosting boundary; nothing is read from the environment here.
    """
    try:
        result = _proxy(request, api_key, post)
    except Exception as e:
        log.exception("Error in proxy handler")
        result = Result.err(UnhandledFailure(str(e)))

    if result.is_err:
        return to_response(result.error)
    # a part without text comes back as an empty object
    payload = {} if result.value is None else {"text": result.value}
    return OutboundResponse.json_body(200, payload)

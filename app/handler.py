"""
Serverless entry point (Netlify Functions / AWS Lambda style).

The platform event carries `httpMethod` and a raw `body`; the key is read once
when the function is loaded and handed to the proxy on every call.
"""
import logging

from app import config
from app.models import InboundRequest
from app.services import proxy

logging.basicConfig(level=logging.INFO)

API_KEY = config.get_api_key()


def to_inbound(event: dict) -> InboundRequest:
    return InboundRequest(
        httpMethod=event.get("httpMethod", ""),
        body=event.get("body") or "",
        isBase64Encoded=bool(event.get("isBase64Encoded")),
    )


def handler(event, context=None):
    response = proxy.handle(to_inbound(event), API_KEY)
    return response.model_dump()

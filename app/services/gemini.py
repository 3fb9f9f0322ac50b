import logging
from typing import Any, Callable, Dict, Optional

import requests

from app.config import GEMINI_API_URL
from app.services.errors import NetworkError, UpstreamShapeError
from app.services.result import Result

log = logging.getLogger(__name__)


def build_payload(prompt: Any) -> Dict[str, Any]:
    part = {} if prompt is None else {"text": prompt}
    return {"contents": [{"role": "user", "parts": [part]}]}


def generate(prompt: Any, api_key: str, post: Optional[Callable[..., requests.Response]] = None) -> Result:
    """POST the prompt to Gemini once and return the decoded JSON body.

    The upstream status code is not inspected; error bodies are JSON too and
    get judged by extract_text. Transport failures and non-JSON bodies come
    back as NetworkError.
    """
    post = post or requests.post
    headers = {"Content-Type": "application/json"}
    try:
        r = post(f"{GEMINI_API_URL}?key={api_key}", json=build_payload(prompt), headers=headers)
        return Result.ok(r.json())
    except (requests.RequestException, ValueError) as e:
        # requests puts the full URL, key included, into its messages
        message = str(e).replace(api_key, "***")
        log.error("Gemini request failed: %s", message)
        return Result.err(NetworkError(message))


def extract_text(result: Any) -> Result:
    """Pull candidates[0].content.parts[0].text out of a generateContent reply."""
    candidates = result.get("candidates") if isinstance(result, dict) else None
    if isinstance(candidates, list) and candidates:
        content = candidates[0].get("content") if isinstance(candidates[0], dict) else None
        parts = content.get("parts") if isinstance(content, dict) else None
        if isinstance(parts, list) and parts:
            first = parts[0]
            return Result.ok(first.get("text") if isinstance(first, dict) else None)

    log.error("Unexpected Gemini API response structure: %s", result)
    return Result.err(UpstreamShapeError(result))

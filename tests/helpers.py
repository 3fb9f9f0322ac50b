import json
from unittest.mock import MagicMock

import requests

OK_REPLY = {"candidates": [{"content": {"parts": [{"text": "hi there"}]}}]}


def fake_response(payload=None, text=None):
    """A stand-in for requests.Response carrying either JSON or raw text."""
    resp = MagicMock(spec=requests.Response)
    if text is not None:
        resp.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", text, 0)
    else:
        resp.json.return_value = payload
    return resp


def body_of(response):
    return json.loads(response.body)

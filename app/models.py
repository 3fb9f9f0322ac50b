import json
from typing import Any, Dict

from pydantic import BaseModel, Field


class InboundRequest(BaseModel):
    httpMethod: str
    body: str = Field("", description="Raw request body, expected to be JSON")
    isBase64Encoded: bool = False


class OutboundResponse(BaseModel):
    statusCode: int
    body: str

    @classmethod
    def json_body(cls, status_code: int, payload: Dict[str, Any]) -> "OutboundResponse":
        return cls(statusCode=status_code, body=json.dumps(payload))

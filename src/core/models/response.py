import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ResponseEnvelope(BaseModel):
    """HTTP-style envelope returned by Lambda handlers.

    ``body`` is already JSON-serialized; API Gateway passes it through as is.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(..., alias="statusCode", ge=100, le=599)
    body: str

    @classmethod
    def from_payload(cls, payload: Any, status_code: int = 200) -> "ResponseEnvelope":
        return cls(status_code=status_code, body=json.dumps(payload))

    def to_lambda(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)

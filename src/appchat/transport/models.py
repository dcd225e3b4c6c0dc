from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TransportResponse(BaseModel):
    """Raw outcome of one request to the assistant endpoint."""

    model_config = ConfigDict(frozen=True)

    status_code: int = Field(description="HTTP-style status code")
    body: Any = Field(default=None, description="Decoded JSON body, or None if it was not JSON")

    @property
    def ok(self) -> bool:
        """Whether the status code signals success."""
        return 200 <= self.status_code < 300

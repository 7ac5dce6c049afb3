"""Immutable value types shared by the request builder and the client."""

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_BASE_URL = "https://apifree.forvo.com"


class ApiConfig(BaseModel):
    """Caller credentials and the endpoint every URL is built on."""

    model_config = ConfigDict(frozen=True)

    key: str = Field(..., description="Forvo API key")
    base_url: str = Field(DEFAULT_BASE_URL, description="Base endpoint without trailing slash")


class CallSpec(BaseModel):
    """Static description of one remote operation."""

    model_config = ConfigDict(frozen=True)

    action: str = Field(..., description="Action identifier embedded in the URL path")
    required: tuple[str, ...] = Field((), description="Required parameter names, in URL order")
    # Documented by Forvo; callers may still pass anything else.
    optional: tuple[str, ...] = Field((), description="Known optional parameter names")

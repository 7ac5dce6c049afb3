"""Client library and MCP server for the Forvo pronunciation API."""

from forvomcp.client import ForvoClient
from forvomcp.errors import ForvoValidationError
from forvomcp.models import DEFAULT_BASE_URL, ApiConfig, CallSpec
from forvomcp.operations import Operation
from forvomcp.request import build_url

__all__ = [
    "DEFAULT_BASE_URL",
    "ApiConfig",
    "CallSpec",
    "ForvoClient",
    "ForvoValidationError",
    "Operation",
    "build_url",
]

"""URL construction for Forvo calls.

Forvo encodes every argument as a ``/<name>/<value>`` path segment pair::

    https://apifree.forvo.com/key/<key>/format/json/action/<action>/word/apple/other-param/1

The casing and escaping rules below are what the service has been observed to
accept. Keep them exactly as they are.
"""

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from forvomcp.errors import ForvoValidationError
from forvomcp.models import ApiConfig, CallSpec

logger = logging.getLogger(__name__)

_CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
_KEY_SEGMENT = re.compile(r"(/key/)[^/\s'\"]+")

# Above this, numbers render in exponent form (1e+21)
_EXPONENT_THRESHOLD = 1e21


def camel_case_to_dash(name: str) -> str:
    return _CAMEL_BOUNDARY.sub(r"\1-\2", name).lower()


def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value.is_integer() and abs(value) < _EXPONENT_THRESHOLD:
        return str(int(value))
    return repr(value)


def make_url_compatible(value: Any) -> str:
    """Render a parameter value as a single path segment."""
    if isinstance(value, str):
        return value.replace(" ", "_").lower()
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_float(value)
    return str(value)


def check_parameters(required: tuple[str, ...], params: Any) -> None:
    """
    Validate call parameters.

    Raises:
        ForvoValidationError: If params is not a mapping, or for the first
            required name (in declared order) that is missing or falsy.
    """
    if not isinstance(params, Mapping):
        raise ForvoValidationError("Parameters should be an object")
    for name in required:
        if not params.get(name):
            raise ForvoValidationError(f"{name} is a required parameter")


def redact_url(text: str) -> str:
    """Hide the API key segment of any URL inside text (URLs, exception messages)."""
    return _KEY_SEGMENT.sub(r"\1***", text)


def build_url(config: ApiConfig, spec: CallSpec, params: Mapping[str, Any] | None = None) -> str:
    """
    Build the request URL for one call.

    Args:
        config: API key and base endpoint.
        spec: The operation being called.
        params: Call parameters. Names not listed in ``spec.required`` are
            appended in iteration order; ``None`` values are skipped.

    Returns:
        The fully qualified URL.

    Raises:
        ForvoValidationError: If the parameters are invalid.
    """
    if params is None:
        params = {}
    check_parameters(spec.required, params)

    optional = [name for name in params if name not in spec.required and params[name] is not None]
    pairs = [
        ("key", config.key),
        ("format", "json"),
        ("action", spec.action),
        *((name, params[name]) for name in spec.required),
        *((name, params[name]) for name in optional),
    ]

    segments = [config.base_url.rstrip("/")]
    for name, value in pairs:
        segments.append(camel_case_to_dash(name))
        segments.append(make_url_compatible(value))
    url = "/".join(segments)

    logger.debug(f"Built URL for {spec.action}: {redact_url(url)}")
    return url

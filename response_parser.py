"""
response_parser.py
Turns raw upstream JSON bodies (success or error) into one canonical dict.

Every public function here is total: bad input degrades to an
{"error": ...} result, nothing is raised to the caller.

    parse_and_return_clean_json(body)            -> {"a": 1} | {"result": 5} | {"error": body}
    parse_error_response(body, default)          -> {"error": "<message or trace-id text>"}
    parse_customer_error_response(body, default) -> {"error": "<error.message or trace-id text>"}
"""
from __future__ import annotations

import json
import logging
import random
import time
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# responseMessage first: VA responses carry both it and a generic "message"
MESSAGE_FIELDS = (
    "responseMessage",
    "message",
    "errorMessage",
    "error_message",
    "msg",
    "description",
)

TRACE_MESSAGE = "Unexpected error occurred. Contact support with trace ID: {}"


# --------------------------------------------------------------------------- #
# JSON accessors
# --------------------------------------------------------------------------- #

def _load_object(text: Any) -> Dict[str, Any]:
    """Decode *text* as a JSON object. Raises ValueError/TypeError otherwise."""
    try:
        parsed = json.loads(text)
    except RecursionError:
        raise ValueError("JSON nested too deeply") from None
    if not isinstance(parsed, dict):
        raise ValueError(f"expected a JSON object, got {type(parsed).__name__}")
    return parsed


def _get_object(mapping: Dict[str, Any], key: str) -> Optional[Dict[str, Any]]:
    value = mapping.get(key)
    return value if isinstance(value, dict) else None


def _get_string(mapping: Dict[str, Any], key: str) -> Optional[str]:
    value = mapping.get(key)
    return value if isinstance(value, str) else None


def _first_message(mapping: Dict[str, Any]) -> Optional[str]:
    for field in MESSAGE_FIELDS:
        message = _get_string(mapping, field)
        if message is not None:
            return message
    return None


def _is_blank(message: Optional[str]) -> bool:
    return message is None or not message.strip()


# --------------------------------------------------------------------------- #
# Trace ids
# --------------------------------------------------------------------------- #

def generate_trace_id() -> str:
    """Return a log-correlation token like ``TR-1718000000000-0042``."""
    millis = int(time.time() * 1000)
    return "TR-%d-%04d" % (millis, random.randint(0, 9999))


def _trace_error(trace_id: str) -> Dict[str, Any]:
    return {"error": TRACE_MESSAGE.format(trace_id)}


# --------------------------------------------------------------------------- #
# Public API
# --------------------------------------------------------------------------- #

def parse_and_return_clean_json(response_body: str) -> Dict[str, Any]:
    """
    Unwrap a success body.

    * ``{"data": {...}}`` returns the inner object.
    * ``{"data": <anything else>}`` returns ``{"result": <value>}``.
    * any other object is returned as is.
    * unparseable text comes back verbatim as ``{"error": response_body}``.
    """
    try:
        response_map = _load_object(response_body)
    except (TypeError, ValueError) as exc:
        logger.warning("Failed to parse response JSON: %s", exc)
        return {"error": response_body}

    if "data" in response_map:
        data = response_map["data"]
        if isinstance(data, dict):
            return data
        return {"result": data}

    return response_map


def extract_error_message(error_map: Dict[str, Any]) -> Optional[str]:
    """Probe the flat message fields, then a nested or bare-string "error"."""
    message = _first_message(error_map)
    if message is not None:
        return message

    if "error" in error_map:
        nested = _get_object(error_map, "error")
        if nested is not None:
            return _first_message(nested)
        return _get_string(error_map, "error")

    return None


def extract_customer_error_message(error_map: Dict[str, Any]) -> Optional[str]:
    """Customer tools only ever answer with ``{"error": {"message": "..."}}``."""
    nested = _get_object(error_map, "error")
    if nested is None:
        return None
    return _get_string(nested, "message")


def parse_error_response(error_response_body: str, default_message: str) -> Dict[str, Any]:
    """
    Reduce an upstream error body to ``{"error": <message>}``.

    When no message can be found the raw body is logged under a fresh trace
    id and only the trace id is handed back. *default_message* is accepted
    for symmetry with the customer variant and is not used.
    """
    try:
        error_map = _load_object(error_response_body)
    except (TypeError, ValueError) as exc:
        trace_id = generate_trace_id()
        logger.error(
            "Failed to parse error response - TraceId: %s, Error: %s, Response: %s",
            trace_id, exc, error_response_body,
        )
        return _trace_error(trace_id)

    message = extract_error_message(error_map)
    if not _is_blank(message):
        return {"error": message}

    trace_id = generate_trace_id()
    logger.error(
        "Unexpected error response format - TraceId: %s, Response: %s",
        trace_id, error_response_body,
    )
    return _trace_error(trace_id)


def parse_customer_error_response(error_response_body: str, default_message: str) -> Dict[str, Any]:
    """Like :func:`parse_error_response` but only trusts ``error.message``."""
    try:
        error_map = _load_object(error_response_body)
    except (TypeError, ValueError) as exc:
        trace_id = generate_trace_id()
        logger.error(
            "Failed to parse customer error response - TraceId: %s, Error: %s, Response: %s",
            trace_id, exc, error_response_body,
        )
        return _trace_error(trace_id)

    message = extract_customer_error_message(error_map)
    if not _is_blank(message):
        return {"error": message}

    trace_id = generate_trace_id()
    logger.error(
        "Customer error response format not recognized - TraceId: %s, Response: %s",
        trace_id, error_response_body,
    )
    return _trace_error(trace_id)

"""
Transport boundary.

Augury does not talk to the network itself. A transport is anything with
a ``query_contract`` method taking the request mapping and returning the
proxy's response payload.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Protocol

import rfc8785

from ..utils import sha256_hex
from .query import Query
from .response import RETURN_CODE_KEYS, RETURN_DATA_KEYS, QueryResult

logger = logging.getLogger(__name__)


class Transport(Protocol):
    def query_contract(self, request: dict[str, Any]) -> Any:
        ...


def extract_vm_output(payload: Any) -> Any:
    """
    Unwrap the proxy envelope around VM output.

    The proxy answers ``{"data": {"data": {...}}, "code": ..., "error": ...}``;
    some gateways drop one level of nesting. Bare VM output passes through.
    """
    current = payload
    for _ in range(2):
        if not isinstance(current, Mapping):
            break
        if any(key in current for key in RETURN_DATA_KEYS):
            break
        inner = current.get("data")
        if not isinstance(inner, Mapping):
            break
        current = inner
    return current


def proxy_error(payload: Any) -> Optional[str]:
    """
    Error text of a proxy envelope that carries no VM output.

    Returns None when the payload holds VM output or reports no error.
    """
    if not isinstance(payload, Mapping):
        return None
    if payload.get("data") is not None or any(key in payload for key in RETURN_DATA_KEYS + RETURN_CODE_KEYS):
        return None
    error = payload.get("error")
    if not error:
        return None
    code = payload.get("code")
    return f"{code}: {error}" if code else str(error)


def canonical_request(query: Query) -> bytes:
    """RFC 8785 canonical JSON of the request."""
    return rfc8785.dumps(query.to_http_request())


def request_fingerprint(query: Query) -> str:
    return sha256_hex(canonical_request(query))


def run_query(query: Query, transport: Transport) -> QueryResult:
    """Send a query through a transport and decode the VM output."""
    request = query.to_http_request()
    logger.debug("Querying %s.%s", request["scAddress"], request["funcName"])
    payload = transport.query_contract(request)
    result = QueryResult.from_http_response(extract_vm_output(payload))
    logger.debug(
        "Query %s returned %s (%d items, gas used %s)",
        request["funcName"],
        result.return_code or "<empty>",
        len(result.items),
        result.gas_used,
    )
    return result

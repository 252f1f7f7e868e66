__all__ = [
    # Query pipeline
    "Query",
    "QueryResult",
    "ReturnItem",
    "Transport",
    "run_query",
    "extract_vm_output",
    "proxy_error",
    "canonical_request",
    "request_fingerprint",
    # Value types
    "Address",
    "Argument",
    "Balance",
    "ContractFunction",
    "GasLimit",
    "MAX_UINT64",
    # Config
    "Settings",
    "load_settings",
    # Errors
    "AuguryError",
    "InvalidArgumentError",
    "AddressError",
    "ContractError",
]

from .config import Settings, load_settings
from .errors import AddressError, AuguryError, ContractError, InvalidArgumentError
from .sigil.address import Address
from .spec.argument import Argument
from .spec.balance import Balance
from .spec.function import ContractFunction
from .spec.gas import MAX_UINT64, GasLimit
from .pneuma.query import Query
from .pneuma.response import QueryResult, ReturnItem
from .pneuma.transport import (
    Transport,
    canonical_request,
    extract_vm_output,
    proxy_error,
    request_fingerprint,
    run_query,
)

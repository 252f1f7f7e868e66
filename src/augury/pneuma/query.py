"""
Query - A read-only contract invocation.

A query never mutates state and is never signed; it is posted to a
network proxy which runs the function and returns the VM output.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..errors import InvalidArgumentError
from ..sigil.address import Address
from ..spec.argument import Argument
from ..spec.balance import Balance
from ..spec.function import ContractFunction


@dataclass(frozen=True)
class Query:
    address: Optional[Address] = None
    func: Optional[ContractFunction] = None
    args: Sequence[Argument] = ()
    caller: Address = field(default_factory=Address.empty)
    value: Balance = field(default_factory=Balance.zero)

    def __post_init__(self) -> None:
        if self.address is None:
            raise InvalidArgumentError("Query address must be set")
        if self.func is None:
            raise InvalidArgumentError("Query function must be set")
        if not isinstance(self.address, Address):
            raise InvalidArgumentError(f"Query address must be an Address, got {type(self.address).__name__}")
        if not isinstance(self.func, ContractFunction):
            raise InvalidArgumentError(f"Query function must be a ContractFunction, got {type(self.func).__name__}")
        if self.func.is_none():
            raise InvalidArgumentError("Query function must be set")
        if self.address.is_empty() or self.address.is_zero():
            raise InvalidArgumentError("Query address must not be empty")

        caller = self.caller if self.caller is not None else Address.empty()
        value = self.value if self.value is not None else Balance.zero()
        args = tuple(self.args or ())
        if not isinstance(caller, Address):
            raise InvalidArgumentError(f"Query caller must be an Address, got {type(caller).__name__}")
        if not isinstance(value, Balance):
            raise InvalidArgumentError(f"Query value must be a Balance, got {type(value).__name__}")
        for arg in args:
            if not isinstance(arg, Argument):
                raise InvalidArgumentError(f"Query arguments must be Argument, got {type(arg).__name__}")

        object.__setattr__(self, "caller", caller)
        object.__setattr__(self, "value", value)
        object.__setattr__(self, "args", args)

    def to_http_request(self) -> dict[str, Any]:
        """
        Serialize the query for the proxy's VM query endpoint.

        The caller is omitted entirely when it is the empty address.
        """
        request: dict[str, Any] = {
            "scAddress": self.address.bech32(),
            "funcName": str(self.func),
            "args": [arg.value_of() for arg in self.args],
            "value": str(self.value),
        }

        if not self.caller.is_empty():
            request["caller"] = self.caller.bech32()

        return request

from __future__ import annotations


class AuguryError(RuntimeError):
    exit_code: int = 1


class InvalidArgumentError(AuguryError):
    exit_code = 2


class AddressError(InvalidArgumentError):
    pass


class ContractError(AuguryError):
    exit_code = 3


__all__ = [
    "AuguryError",
    "InvalidArgumentError",
    "AddressError",
    "ContractError",
]

"""
Account addresses.

An address wraps a 32-byte public key. The human-readable form is bech32
with a configurable prefix (``erd`` by default); the encoding itself is
done by the ``bech32`` reference implementation.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

import bech32

from ..config import DEFAULT_HRP
from ..errors import AddressError

PUBKEY_LENGTH = 32


@dataclass(frozen=True)
class Address:
    pubkey: bytes = b""
    hrp: str = field(default=DEFAULT_HRP, compare=False)

    def __post_init__(self) -> None:
        if not isinstance(self.pubkey, (bytes, bytearray)):
            raise AddressError(f"Address pubkey must be bytes, got {type(self.pubkey).__name__}")
        if self.pubkey and len(self.pubkey) != PUBKEY_LENGTH:
            raise AddressError(
                f"Address pubkey must be {PUBKEY_LENGTH} bytes, got {len(self.pubkey)}"
            )
        object.__setattr__(self, "pubkey", bytes(self.pubkey))

    @classmethod
    def empty(cls) -> "Address":
        return cls()

    @classmethod
    def zero(cls, hrp: str = DEFAULT_HRP) -> "Address":
        return cls(bytes(PUBKEY_LENGTH), hrp=hrp)

    @classmethod
    def from_hex(cls, value: str, hrp: str = DEFAULT_HRP) -> "Address":
        raw = value[2:] if value.startswith(("0x", "0X")) else value
        try:
            pubkey = bytes.fromhex(raw)
        except ValueError as exc:
            raise AddressError(f"Invalid hex address: {value!r}") from exc
        return cls(pubkey, hrp=hrp)

    @classmethod
    def from_bech32(cls, value: str) -> "Address":
        hrp, data = bech32.bech32_decode(value)
        if hrp is None or data is None:
            raise AddressError(f"Invalid bech32 address: {value!r}")
        decoded = bech32.convertbits(data, 5, 8, False)
        if decoded is None:
            raise AddressError(f"Invalid bech32 payload: {value!r}")
        return cls(bytes(decoded), hrp=hrp)

    @classmethod
    def from_string(cls, value: str, hrp: str = DEFAULT_HRP) -> "Address":
        """Parse either a bech32 address or a (0x-prefixed) hex public key."""
        value = value.strip()
        if value.lower().startswith(f"{hrp}1"):
            return cls.from_bech32(value)
        return cls.from_hex(value, hrp=hrp)

    @classmethod
    def of(cls, value: Union["Address", str, bytes, None], hrp: str = DEFAULT_HRP) -> "Address":
        if value is None:
            return cls.empty()
        if isinstance(value, Address):
            return value
        if isinstance(value, (bytes, bytearray)):
            return cls(bytes(value), hrp=hrp)
        if isinstance(value, str):
            return cls.from_string(value, hrp=hrp)
        raise AddressError(f"Cannot build an address from {type(value).__name__}")

    def is_empty(self) -> bool:
        return not self.pubkey

    def is_zero(self) -> bool:
        return bool(self.pubkey) and not any(self.pubkey)

    def assert_not_empty(self) -> None:
        if self.is_empty():
            raise AddressError("Address is empty")

    def hex(self) -> str:
        return self.pubkey.hex()

    def bech32(self) -> str:
        self.assert_not_empty()
        words = bech32.convertbits(self.pubkey, 8, 5, True)
        return bech32.bech32_encode(self.hrp, words)

    def __str__(self) -> str:
        return "" if self.is_empty() else self.bech32()

"""
VM output decoding.

The proxy has returned VM output with both camelCase and PascalCase field
names over time, so every field is looked up under both spellings. A
failed contract call is still valid output: decoding never raises, it
only degrades malformed fields to zero values.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping, Optional, Union

from ..errors import ContractError
from ..spec.gas import GasLimit, gas_used_from_remaining
from ..utils import base64_decode_lenient, first_present

logger = logging.getLogger(__name__)

RETURN_DATA_KEYS = ("returnData", "ReturnData")
RETURN_CODE_KEYS = ("returnCode", "ReturnCode")
RETURN_MESSAGE_KEYS = ("returnMessage", "ReturnMessage")
GAS_REMAINING_KEYS = ("gasRemaining", "GasRemaining")

SUCCESS_CODES = ("ok", "0")


def _to_native_number(value: int) -> Union[int, float]:
    # Matches a double-precision number: exact up to 2**53, rounded beyond,
    # infinite past the float range.
    try:
        return int(float(value))
    except OverflowError:
        return math.inf


@dataclass(frozen=True)
class ReturnItem:
    """One value returned by the contract, under every raw interpretation."""

    as_base64: str
    as_bytes: bytes
    as_hex: str
    as_number: Union[int, float]
    # Decimal repr of a multi-kilobyte int exceeds the int/str conversion limit.
    as_big_int: int = field(repr=False)
    as_string: str
    as_bool: bool

    @classmethod
    def from_base64(cls, value: Optional[str]) -> "ReturnItem":
        as_base64 = value if isinstance(value, str) else ""
        as_bytes = base64_decode_lenient(as_base64)
        as_hex = as_bytes.hex()
        as_big_int = int(as_hex or "00", 16)
        as_number = _to_native_number(as_big_int) if as_hex else 0
        as_string = as_bytes.decode("utf-8", errors="replace")
        as_bool = (
            as_number != 0
            and as_string != "false"
            and as_string != ""
            and as_big_int != 0
        )
        return cls(
            as_base64=as_base64,
            as_bytes=as_bytes,
            as_hex=as_hex,
            as_number=as_number,
            as_big_int=as_big_int,
            as_string=as_string,
            as_bool=as_bool,
        )

    @classmethod
    def from_list(cls, raw: Iterable[Any]) -> tuple["ReturnItem", ...]:
        return tuple(cls.from_base64(item) for item in raw)

    def big_int_text(self) -> str:
        """Decimal form of ``as_big_int``, or 0x-hex when it is too long for decimal."""
        try:
            return str(self.as_big_int)
        except ValueError:
            return hex(self.as_big_int)

    def to_dict(self) -> dict[str, Any]:
        return {
            "asBase64": self.as_base64,
            "asHex": self.as_hex,
            "asNumber": self.as_number,
            "asBigInt": self.big_int_text(),
            "asString": self.as_string,
            "asBool": self.as_bool,
        }


def _parse_gas_remaining(value: Any) -> int:
    if value is None:
        return 0
    if isinstance(value, bool):
        logger.debug("Ignoring boolean gasRemaining %r", value)
        return 0
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isfinite(value):
            return int(value)
        logger.debug("Ignoring non-finite gasRemaining %r", value)
        return 0
    try:
        return int(str(value).strip(), 10)
    except ValueError:
        logger.debug("Ignoring unparsable gasRemaining %r", value)
        return 0


def _as_text(value: Any) -> str:
    if value is None:
        return ""
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class QueryResult:
    items: tuple[ReturnItem, ...] = ()
    return_code: str = ""
    return_message: str = ""
    gas_used: GasLimit = field(default_factory=GasLimit.min)
    vm_output: Any = field(default=None, compare=False, repr=False)

    @classmethod
    def from_http_response(cls, payload: Any) -> "QueryResult":
        """
        Decode VM output as returned by the proxy.

        Args:
            payload: The (unwrapped) VM output mapping

        Returns:
            Decoded result; missing fields become empty values
        """
        if not isinstance(payload, Mapping):
            logger.debug("VM output is not a mapping: %r", type(payload).__name__)
            return cls(vm_output=payload)

        raw_items = first_present(payload, RETURN_DATA_KEYS)
        if raw_items is None:
            raw_items = []
        elif isinstance(raw_items, (str, bytes)) or not isinstance(raw_items, Iterable):
            logger.debug("Ignoring malformed returnData %r", raw_items)
            raw_items = []

        gas_remaining = _parse_gas_remaining(first_present(payload, GAS_REMAINING_KEYS))

        return cls(
            items=ReturnItem.from_list(raw_items),
            return_code=_as_text(first_present(payload, RETURN_CODE_KEYS)),
            return_message=_as_text(first_present(payload, RETURN_MESSAGE_KEYS)),
            gas_used=gas_used_from_remaining(gas_remaining),
            vm_output=payload,
        )

    def is_success(self) -> bool:
        return self.return_code in SUCCESS_CODES

    def assert_success(self) -> None:
        if self.is_success():
            return

        raise ContractError(f"{self.return_code}: {self.return_message}")

    def first_result(self) -> Optional[ReturnItem]:
        return self.items[0] if self.items else None

    def buffers(self) -> list[bytes]:
        return [item.as_bytes for item in self.items]

    def to_dict(self) -> dict[str, Any]:
        """Plain projection for logging and JSON output."""
        return {
            "success": self.is_success(),
            "returnData": [item.to_dict() for item in self.items],
            "returnCode": self.return_code,
            "returnMessage": self.return_message,
            "gasUsed": self.gas_used.value_of(),
        }

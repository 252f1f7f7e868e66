"""Tests for decoding VM output into query results."""

from __future__ import annotations

import pytest

from augury.errors import ContractError
from augury.pneuma.response import QueryResult, ReturnItem
from augury.spec.gas import MAX_UINT64, GasLimit

from conftest import b64


class TestFieldCasing:
    """camelCase and PascalCase payloads decode the same way."""

    def test_pascal_equals_camel(self) -> None:
        camel = {
            "returnData": ["AQ==", "dHJ1ZQ=="],
            "returnCode": "ok",
            "returnMessage": "",
            "gasRemaining": 1000,
        }
        pascal = {
            "ReturnData": ["AQ==", "dHJ1ZQ=="],
            "ReturnCode": "ok",
            "ReturnMessage": "",
            "GasRemaining": 1000,
        }
        assert QueryResult.from_http_response(camel) == QueryResult.from_http_response(pascal)

    def test_camel_preferred_when_both_present(self) -> None:
        result = QueryResult.from_http_response(
            {"returnCode": "ok", "ReturnCode": "user error", "returnData": [], "ReturnData": ["AQ=="]}
        )
        assert result.return_code == "ok"
        assert result.items == ()

    def test_falls_back_when_camel_is_null(self) -> None:
        result = QueryResult.from_http_response({"returnCode": None, "ReturnCode": "ok"})
        assert result.return_code == "ok"

    def test_missing_fields_are_zero_values(self) -> None:
        result = QueryResult.from_http_response({})
        assert result.items == ()
        assert result.return_code == ""
        assert result.return_message == ""
        assert result.gas_used == GasLimit(MAX_UINT64)

    def test_non_mapping_payload(self) -> None:
        result = QueryResult.from_http_response(None)
        assert result.items == ()
        assert result.return_code == ""
        assert result.gas_used == GasLimit.min()

    def test_numeric_return_code_is_stringified(self) -> None:
        result = QueryResult.from_http_response({"ReturnCode": 0})
        assert result.return_code == "0"
        assert result.is_success()

    def test_malformed_return_data_is_ignored(self) -> None:
        result = QueryResult.from_http_response({"returnData": "AQ=="})
        assert result.items == ()

    def test_null_items_decode_as_empty(self) -> None:
        result = QueryResult.from_http_response({"returnData": [None, "AQ=="]})
        assert result.items[0] == ReturnItem.from_base64("")
        assert result.items[1].as_number == 1


class TestGasUsed:
    """Used gas is the uint64 complement of remaining gas."""

    @pytest.mark.parametrize(
        "remaining, used",
        [
            (MAX_UINT64, 0),
            (0, MAX_UINT64),
            (100, 2**64 - 101),
            (str(MAX_UINT64), 0),
            ("100", 2**64 - 101),
            (100.0, 2**64 - 101),
        ],
    )
    def test_complement(self, remaining, used: int) -> None:
        result = QueryResult.from_http_response({"gasRemaining": remaining})
        assert result.gas_used.value_of() == used

    @pytest.mark.parametrize("remaining", ["lots", True, float("nan"), [1]])
    def test_unparsable_counts_as_zero(self, remaining) -> None:
        result = QueryResult.from_http_response({"gasRemaining": remaining})
        assert result.gas_used.value_of() == MAX_UINT64

    def test_out_of_range_wraps(self) -> None:
        result = QueryResult.from_http_response({"gasRemaining": 2**64 + 5})
        assert result.gas_used.value_of() == MAX_UINT64 - 5


class TestSuccess:
    """Success predicate and assertion."""

    @pytest.mark.parametrize("code", ["ok", "0"])
    def test_success_codes(self, code: str) -> None:
        result = QueryResult.from_http_response({"returnCode": code})
        assert result.is_success()
        result.assert_success()

    @pytest.mark.parametrize("code", ["user error", "", "00", "OK"])
    def test_failure_codes(self, code: str) -> None:
        assert not QueryResult.from_http_response({"returnCode": code}).is_success()

    def test_assert_success_message(self) -> None:
        result = QueryResult.from_http_response(
            {"returnCode": "out of gas", "returnMessage": "insufficient funds"}
        )
        with pytest.raises(ContractError) as excinfo:
            result.assert_success()
        assert str(excinfo.value) == "out of gas: insufficient funds"

    def test_decoding_failed_call_does_not_raise(self) -> None:
        result = QueryResult.from_http_response({"returnCode": "user error", "returnMessage": "boom"})
        assert result.return_message == "boom"


class TestAccessors:
    """first_result, buffers and the plain projection."""

    def test_first_result_on_empty(self) -> None:
        assert QueryResult.from_http_response({"returnData": []}).first_result() is None

    def test_first_result(self) -> None:
        result = QueryResult.from_http_response({"returnData": ["Cg==", "AQ=="]})
        assert result.first_result().as_number == 10

    def test_buffers_preserve_order(self) -> None:
        raw = [b"one", b"", b"three"]
        result = QueryResult.from_http_response({"returnData": [b64(x) for x in raw]})
        assert result.buffers() == raw

    def test_to_dict(self) -> None:
        result = QueryResult.from_http_response(
            {"returnData": ["AQ=="], "returnCode": "ok", "gasRemaining": MAX_UINT64 - 42}
        )
        projected = result.to_dict()
        assert projected["success"] is True
        assert projected["returnCode"] == "ok"
        assert projected["returnMessage"] == ""
        assert projected["gasUsed"] == 42
        assert isinstance(projected["gasUsed"], int)
        assert projected["returnData"] == [result.items[0].to_dict()]

    def test_vm_output_kept_but_not_compared(self) -> None:
        payload = {"returnCode": "ok"}
        result = QueryResult.from_http_response(payload)
        assert result.vm_output is payload
        assert result == QueryResult(return_code="ok", gas_used=GasLimit(MAX_UINT64))

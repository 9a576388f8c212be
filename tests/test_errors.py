from __future__ import annotations

from kvstore import ErrorCode, ReadError, SerializationFailedError, StoreError, UnsupportedValueError


def test_message_and_code_come_from_the_class():
    err = ReadError("Could not read x.json", details={"path": "x.json"})
    assert str(err) == "Could not read x.json"
    assert err.code is ErrorCode.IO_READ_FAILED
    assert err.to_dict() == {
        "error": "ReadError",
        "code": "IO_READ_FAILED",
        "detail": "Could not read x.json",
        "details": {"path": "x.json"},
    }


def test_base_error_defaults():
    err = StoreError()
    assert str(err) == "A store error occurred"
    assert err.to_dict() == {"error": "StoreError", "code": "STORE_FAILED", "detail": "A store error occurred"}


def test_cause_is_chained():
    cause = TypeError("cannot pickle")
    err = SerializationFailedError.for_value(object(), cause)
    assert err.__cause__ is cause
    assert err.details == {"kind": "object"}


def test_unsupported_value_names_kind_and_backend():
    err = UnsupportedValueError.for_type("binary", object(), reason="invalid start byte.")
    assert str(err) == "Values of type binary are not supported by object: invalid start byte."

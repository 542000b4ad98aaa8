import pytest

from fleetadmin.libs.result import Error, Return


def test_ok_result():
    result = Return.ok({"id": 1})

    assert result.is_ok()
    assert not result.is_err()
    assert result.value == {"id": 1}
    assert result.error is None


def test_err_result():
    error = Error("COMPANY_NOT_FOUND", "Company not found")
    result = Return.err(error)

    assert result.is_err()
    assert result.error is error
    with pytest.raises(ValueError):
        result.value


def test_ok_without_value():
    assert Return.ok().is_ok()
    assert Return.ok().value is None

"""Request Validation — verifies company/position rule sets and id checks.

Tests cover:
    - Valid requests pass with no failures
    - Every required company field rejects empty and whitespace-only values
    - Every bounded field accepts its ceiling and rejects ceiling + 1
    - Leading/trailing whitespace counts toward the length
    - Position description bounds; numeric fields need presence only
    - require_positive_id rejects 0 and negatives
"""

import pytest

from app.core.domain_types import ResourceType
from app.core.errors import BadRequestError
from app.core.validation import (
    ADDRESS_MAX_LENGTH, COMPANY_NAME_MAX_LENGTH, CUIT_MAX_LENGTH,
    PHONE_MAX_LENGTH, POSITION_DESCRIPTION_MAX_LENGTH,
    CreateCompanyValidator, PositionValidator, ValidationResult,
    require_positive_id,
)
from app.schemas.company import CompanyRequest
from app.schemas.position import PositionRequest


def _company(**overrides) -> CompanyRequest:
    data = {
        "cuit": "20354987562",
        "name": "CompanyTest",
        "address": "Test address",
        "phone": "5544332211",
    }
    data.update(overrides)
    return CompanyRequest(**data)


def _position(**overrides) -> PositionRequest:
    data = {
        "description": "Lider",
        "hierarchy": 1,
        "max_amount": 1000,
        "company_id": 1,
    }
    data.update(overrides)
    return PositionRequest(**data)


def test_valid_company_passes():
    result = CreateCompanyValidator().validate(_company())
    assert result.is_valid
    assert result.errors == []


@pytest.mark.parametrize("field", ["cuit", "name", "address", "phone"])
def test_empty_company_field_fails(field):
    result = CreateCompanyValidator().validate(_company(**{field: ""}))
    assert not result.is_valid
    assert [e.field for e in result.errors] == [field]


@pytest.mark.parametrize("field", ["cuit", "name", "address", "phone"])
def test_whitespace_only_company_field_fails(field):
    result = CreateCompanyValidator().validate(_company(**{field: "   "}))
    assert not result.is_valid


@pytest.mark.parametrize("field, value", [
    ("cuit", "1234567891234567891"),
    ("name", "123456789" * 7),
    ("address", "123456789" * 14),
    ("phone", "1234567891234567891"),
])
def test_over_length_company_field_fails(field, value):
    result = CreateCompanyValidator().validate(_company(**{field: value}))
    assert not result.is_valid
    assert result.errors[0].field == field


@pytest.mark.parametrize("field, limit", [
    ("cuit", CUIT_MAX_LENGTH),
    ("name", COMPANY_NAME_MAX_LENGTH),
    ("address", ADDRESS_MAX_LENGTH),
    ("phone", PHONE_MAX_LENGTH),
])
def test_company_field_at_limit_passes(field, limit):
    result = CreateCompanyValidator().validate(_company(**{field: "x" * limit}))
    assert result.is_valid


@pytest.mark.parametrize("field, limit", [
    ("cuit", CUIT_MAX_LENGTH),
    ("name", COMPANY_NAME_MAX_LENGTH),
    ("address", ADDRESS_MAX_LENGTH),
    ("phone", PHONE_MAX_LENGTH),
])
def test_company_field_one_over_limit_fails(field, limit):
    result = CreateCompanyValidator().validate(
        _company(**{field: "x" * (limit + 1)}),
    )
    assert [e.field for e in result.errors] == [field]


@pytest.mark.parametrize("field, limit", [
    ("cuit", CUIT_MAX_LENGTH),
    ("name", COMPANY_NAME_MAX_LENGTH),
    ("address", ADDRESS_MAX_LENGTH),
    ("phone", PHONE_MAX_LENGTH),
])
def test_padding_counts_toward_company_field_length(field, limit):
    result = CreateCompanyValidator().validate(
        _company(**{field: "  " + "1" * limit}),
    )
    assert [e.field for e in result.errors] == [field]


def test_all_failures_are_collected():
    result = CreateCompanyValidator().validate(
        _company(cuit="", name="", address="", phone=""),
    )
    assert {e.field for e in result.errors} == {
        "cuit", "name", "address", "phone",
    }


def test_to_details_shape():
    result = CreateCompanyValidator().validate(_company(cuit=""))
    details = result.to_details()
    assert details[0]["field"] == "cuit"
    assert details[0]["message"]


def test_empty_result_is_valid():
    assert ValidationResult().is_valid


def test_valid_position_passes():
    assert PositionValidator().validate(_position()).is_valid


def test_empty_position_description_fails():
    result = PositionValidator().validate(_position(description=""))
    assert [e.field for e in result.errors] == ["description"]


def test_position_description_at_limit_passes():
    result = PositionValidator().validate(
        _position(description="x" * POSITION_DESCRIPTION_MAX_LENGTH),
    )
    assert result.is_valid


def test_position_description_one_over_limit_fails():
    result = PositionValidator().validate(
        _position(description="x" * (POSITION_DESCRIPTION_MAX_LENGTH + 1)),
    )
    assert [e.field for e in result.errors] == ["description"]


def test_padded_position_description_over_limit_fails():
    result = PositionValidator().validate(
        _position(description=" " + "x" * POSITION_DESCRIPTION_MAX_LENGTH),
    )
    assert not result.is_valid


def test_whitespace_only_position_description_fails():
    result = PositionValidator().validate(_position(description="   "))
    assert [e.field for e in result.errors] == ["description"]


def test_position_numeric_fields_have_no_range_rule():
    result = PositionValidator().validate(
        _position(hierarchy=0, max_amount=-5),
    )
    assert result.is_valid


@pytest.mark.parametrize("value", [0, -1, -100])
def test_require_positive_id_rejects_non_positive(value):
    with pytest.raises(BadRequestError) as exc_info:
        require_positive_id(value, ResourceType.POSITION)
    assert "Position id" in exc_info.value.message


def test_require_positive_id_accepts_positive():
    require_positive_id(1, ResourceType.COMPANY)

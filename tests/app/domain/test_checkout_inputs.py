"""Testes dos modelos de entrada do formulário."""

from __future__ import annotations

from datetime import date

import pydantic
import pytest

from api.validators.checkout import collect_field_errors, messages
from app.domain.checkout import CheckoutInput, CreditCardInput, CustomerInput
from app.domain.result import Failure, Success
from tests.fakes.asaas_payloads import credit_card_form, customer_form


def _errors(model: type[pydantic.BaseModel], data: dict) -> dict[str, str]:
    with pytest.raises(pydantic.ValidationError) as exc_info:
        model.model_validate(data)
    return collect_field_errors(exc_info.value)


def test_customer_accepts_masked_values() -> None:
    customer = CustomerInput.model_validate(customer_form())
    assert customer.tax_id_digits == "52998224725"
    assert customer.person_type == "FISICA"
    assert customer.mobile == "11987654321"
    assert customer.landline is None


def test_customer_accepts_field_names() -> None:
    customer = CustomerInput(
        name="Maria da Silva",
        cpf_cnpj="52998224725",
        email="maria@example.com",
        phone="(11) 3333-4444",
    )
    assert customer.landline == "1133334444"


@pytest.mark.parametrize(
    ("override", "message"),
    [
        ({"cpfCnpj": "123.456.789-00"}, messages.TAX_ID_INVALID),
        ({"cpfCnpj": "529.982"}, messages.TAX_ID_INVALID),
        ({"cpfCnpj": "５２９．９８２．２４７－２５"}, messages.TAX_ID_INVALID),
        ({"email": "maria"}, messages.EMAIL_INVALID),
        ({"phone": "11987654321"}, messages.PHONE_INVALID),
        ({"name": "Al"}, messages.NAME_INVALID),
    ],
)
def test_customer_field_messages(override: dict, message: str) -> None:
    errors = _errors(CustomerInput, customer_form(**override))
    assert list(errors.values()) == [message]


def test_missing_field_is_required() -> None:
    data = customer_form()
    del data["email"]
    errors = _errors(CustomerInput, data)
    assert list(errors.values()) == [messages.REQUIRED_FIELD]


def test_card_repr_never_shows_full_number() -> None:
    card = CreditCardInput.model_validate(credit_card_form())
    assert card.last_digits == "0366"
    assert "4532015112830366" not in repr(card)
    assert "4532015112830366" not in str(card)


def test_card_month_accepts_int() -> None:
    card = CreditCardInput.model_validate(credit_card_form(expiryMonth=3))
    assert card.expiry_month == "03"


@pytest.mark.parametrize(
    ("override", "message"),
    [
        ({"number": "4532015112830367"}, messages.CARD_NUMBER_INVALID),
        ({"number": "４５３２０１５１１２８３０３６６"}, messages.CARD_NUMBER_INVALID),
        ({"expiryMonth": "13"}, messages.EXPIRY_MONTH_INVALID),
        ({"expiryYear": "2019"}, messages.EXPIRY_YEAR_INVALID),
        ({"ccv": "12"}, messages.CCV_INVALID),
        ({"holderName": "Jo"}, messages.HOLDER_NAME_INVALID),
    ],
)
def test_card_field_messages(override: dict, message: str) -> None:
    errors = _errors(CreditCardInput, credit_card_form(**override))
    assert message in errors.values()


def test_card_expired_in_current_year() -> None:
    today = date.today()
    if today.month == 1:
        pytest.skip("Sem mês anterior no ano corrente")
    errors = _errors(
        CreditCardInput,
        credit_card_form(expiryMonth=f"{today.month - 1:02d}", expiryYear=str(today.year)),
    )
    assert errors == {"__root__": messages.CARD_EXPIRED}


@pytest.mark.parametrize(
    "amount", [0, -10, "abc", True, float("inf"), float("-inf"), float("nan"), "Infinity", "1e309"]
)
def test_checkout_amount_must_be_positive(amount: object) -> None:
    errors = _errors(
        CheckoutInput,
        {"customer": customer_form(), "creditCard": credit_card_form(), "amount": amount},
    )
    assert errors == {"amount": messages.AMOUNT_INVALID}


def test_result_envelopes() -> None:
    customer = CustomerInput.model_validate(customer_form())
    assert Success(customer).to_envelope() == {
        "success": True,
        "data": {
            "name": "Maria da Silva",
            "cpfCnpj": "529.982.247-25",
            "email": "maria@example.com",
            "phone": "(11) 98765-4321",
        },
    }
    assert Failure("x").to_envelope() == {"success": False, "error": "x"}
    assert Failure("x", field_errors={"amount": "y"}).to_envelope() == {
        "success": False,
        "error": "x",
        "field_errors": {"amount": "y"},
    }

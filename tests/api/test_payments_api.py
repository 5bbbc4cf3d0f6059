"""Tests for payment and task API actions."""

from datetime import datetime

import pytest

from tigerbay.models.payments import CreatePaymentRequest, PaymentAmount, ProviderDatum
from tigerbay.models.tasks import CreateTaskRequest

PAYMENT = {
    "Id": 11,
    "CreatedDateTime": "2024-05-01T10:00:00",
    "PaymentAmount": {"CurrencyCode": "GBP", "Value": 250.0},
    "Status": "Complete",
    "Last4Digits": "4242",
    "ProviderData": [{"key": "auth", "value": "xyz"}],
}


def test_create_payment(client, fake_api):
    """Payments are created under the version 3 reservations path."""
    fake_api.route("POST", "/3/sales/reservations/42/payments", PAYMENT)

    payment = client.payments.create(
        42,
        CreatePaymentRequest(
            amount=PaymentAmount(currency_code="GBP", value=250.0),
            status="Complete",
            provider="Test",
            last4_digits="4242",
            provider_data=[ProviderDatum(key="auth", value="xyz")],
        ),
    )

    assert payment.id == 11
    assert payment.last4_digits == "4242"
    assert fake_api.last_json() == {
        "Amount": {"CurrencyCode": "GBP", "Value": 250.0},
        "Status": "Complete",
        "Provider": "Test",
        "Last4Digits": "4242",
        "ProviderData": [{"key": "auth", "value": "xyz"}],
    }


def test_find_and_list_payments(client, fake_api):
    fake_api.route("GET", "/3/sales/reservations/42/payments/11", PAYMENT)
    fake_api.route("GET", "/3/sales/reservations/42/payments", [PAYMENT, PAYMENT])

    assert client.payments.find(42, 11).status == "Complete"
    assert len(client.payments.list(42)) == 2


def test_finalize_is_deprecated(client, fake_api):
    """finalize still works but warns."""
    fake_api.route(
        "POST", "/sales/reservations/42/payments/11/completionRequest", PAYMENT
    )

    with pytest.warns(DeprecationWarning):
        payment = client.payments.finalize(42, 11)

    assert payment.payment_amount.value == 250.0


# ---------------------------------------------------------------------------
# Tasks
# ---------------------------------------------------------------------------


def test_create_task(client, fake_api):
    """Task ids use the API's upper-case ID spelling."""
    fake_api.route(
        "POST",
        "/sales/reservations/42/tasks",
        {"ID": 5, "Description": "Send docs", "TaskType": {"ID": 1, "Name": "Email"}},
    )

    task = client.tasks.create(
        42,
        CreateTaskRequest(
            task_type="Email",
            description="Send docs",
            assigned_to_user_id=9,
            action_date=datetime(2024, 5, 2, 9, 0),
        ),
    )

    assert task.id == 5
    assert fake_api.last_json() == {
        "TaskType": "Email",
        "Description": "Send docs",
        "AssignedToUserID": 9,
        "ActionDate": "2024-05-02T09:00:00",
    }


def test_list_tasks(client, fake_api):
    fake_api.route("GET", "/sales/reservations/42/tasks", [])

    assert client.tasks.list(42) == []

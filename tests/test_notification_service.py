from decimal import Decimal

import pytest

from cashin_mailer.domain.models import PaymentNotificationRequest
from cashin_mailer.domain.services import NotificationService
from tests.conftest import FIXED_CODE


@pytest.fixture
def notification_request():
    return PaymentNotificationRequest(
        name="Ana",
        email="ana@x.com",
        amount=Decimal("110.00"),
        source="GCash",
        userId="u1",
    )


def test_notification_service_can_be_instantiated(notification_service_factory):
    service = notification_service_factory()

    assert isinstance(service, NotificationService)


@pytest.mark.asyncio
async def test_notification_service_sends_rendered_document(
    mock_relay, notification_service_factory, notification_request
):
    """Test that the rendered email is handed to the relay exactly once"""
    service = notification_service_factory(relay=mock_relay)

    result = await service.send_payment_instructions(notification_request)

    assert result.ok is True
    assert len(mock_relay.sent_messages) == 1
    sent = mock_relay.sent_messages[0]
    assert sent["recipient"] == "ana@x.com"
    assert sent["subject"] == f"[komyut] Payment Instructions for {FIXED_CODE}"
    assert "PHP 110.00" in sent["html_body"]


@pytest.mark.asyncio
async def test_notification_service_returns_failure_without_retry(
    mock_failing_relay, notification_service_factory, notification_request
):
    """Test that a relay failure is reported and not retried"""
    service = notification_service_factory(relay=mock_failing_relay)

    result = await service.send_payment_instructions(notification_request)

    assert result.ok is False
    assert "535" in result.reason
    assert len(mock_failing_relay.sent_messages) == 1


@pytest.mark.asyncio
async def test_notification_service_turns_relay_exception_into_failure(
    mock_raising_relay, notification_service_factory, notification_request
):
    service = notification_service_factory(relay=mock_raising_relay)

    result = await service.send_payment_instructions(notification_request)

    assert result.ok is False
    assert "ConnectionError" in result.reason


@pytest.mark.asyncio
async def test_notification_service_close_closes_relay(mock_relay, notification_service_factory):
    service = notification_service_factory(relay=mock_relay)

    await service.close()

    assert mock_relay.closed is True

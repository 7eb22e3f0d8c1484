from datetime import date

import pytest
from fastapi.testclient import TestClient

from cashin_mailer.api import create_app
from cashin_mailer.config.settings import Settings
from cashin_mailer.domain.models import BrandProfile, ChannelAccounts, DispatchResult
from cashin_mailer.domain.renderer import InstructionRenderer
from cashin_mailer.domain.services import NotificationService

FIXED_TODAY = date(2026, 10, 19)
FIXED_CODE = "KOMYUT-AB12CD345"
TEST_ACCOUNTS = ChannelAccounts(
    gcash_number="0900 000 0001",
    maya_number="0900 000 0002",
    bank_name="Test Bank",
    bank_account_number="0000 1111 2222",
)


class MockMailRelay:
    def __init__(self, failing: bool = False, raising: bool = False):
        self.failing = failing
        self.raising = raising
        self.sent_messages = []
        self.closed = False

    async def send(self, recipient: str, subject: str, html_body: str) -> DispatchResult:
        if self.raising:
            raise ConnectionError("relay connection reset")
        self.sent_messages.append(
            {"recipient": recipient, "subject": subject, "html_body": html_body}
        )
        if self.failing:
            return DispatchResult.failed("535 Username and Password not accepted")
        return DispatchResult.sent("250 OK")

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def brand():
    return BrandProfile()


@pytest.fixture
def renderer(brand):
    """Renderer with a fixed date and fixed generated code"""
    return InstructionRenderer(
        brand=brand,
        accounts=TEST_ACCOUNTS,
        today=lambda: FIXED_TODAY,
        code_generator=lambda tag: FIXED_CODE,
    )


@pytest.fixture
def mock_relay():
    return MockMailRelay()


@pytest.fixture
def mock_failing_relay():
    return MockMailRelay(failing=True)


@pytest.fixture
def mock_raising_relay():
    return MockMailRelay(raising=True)


@pytest.fixture
def notification_service_factory(renderer):
    """Fixture that returns a NotificationService factory"""
    def create(relay=None):
        return NotificationService(renderer=renderer, relay=relay or MockMailRelay())
    return create


@pytest.fixture
def app_settings():
    return Settings(_env_file=None)


@pytest.fixture
def client_factory(notification_service_factory, app_settings):
    def create(relay):
        app = create_app(notification_service_factory(relay), app_settings)
        return TestClient(app)
    return create


@pytest.fixture
def client(client_factory, mock_relay):
    """Create a test client backed by a relay that accepts everything"""
    return client_factory(mock_relay)


@pytest.fixture
def valid_notification_data():
    """Create valid notification data for testing"""
    return {
        "name": "Ana",
        "email": "ana@x.com",
        "amount": 110.00,
        "source": "GCash",
        "userId": "u1",
    }

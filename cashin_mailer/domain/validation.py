import logging
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from cashin_mailer.domain.models import PaymentNotificationRequest

logger = logging.getLogger(__name__)

MISSING_FIELDS_MESSAGE = "Missing required fields."


# Custom exceptions
class PaymentRequestValidationError(Exception):
    """Raised when an inbound payload is incomplete or malformed."""

    def __init__(self, message: str = MISSING_FIELDS_MESSAGE, fields: tuple[str, ...] = ()):
        super().__init__(message)
        self.message = message
        self.fields = fields


class AmountFormatError(PaymentRequestValidationError):
    """Raised when an amount cannot be formatted for display."""
    pass


def validate_payload(payload: Any) -> PaymentNotificationRequest:
    """Turn a raw JSON payload into a fully-populated request.

    Every required field must be present and truthy, and ``amount`` must be a
    finite positive number. Nothing is coerced beyond reading ``amount`` as a
    decimal.
    """
    if not isinstance(payload, Mapping):
        logger.warning(f"Rejected payload of type {type(payload).__name__}")
        raise PaymentRequestValidationError()

    try:
        return PaymentNotificationRequest.model_validate(dict(payload))
    except ValidationError as exc:
        fields = tuple(
            str(error["loc"][0]) for error in exc.errors() if error.get("loc")
        )
        logger.warning(f"Rejected payment notification request, invalid fields: {fields}")
        raise PaymentRequestValidationError(fields=fields) from exc

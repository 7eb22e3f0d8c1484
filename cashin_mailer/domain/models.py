from dataclasses import dataclass
from decimal import Decimal
from typing import Annotated, Any, Optional

from pydantic import BaseModel, Field, StringConstraints, field_validator

NonEmptyStr = Annotated[str, StringConstraints(min_length=1)]

SERVICE_FEE = Decimal("10.00")
CURRENCY = "PHP"


class PaymentNotificationRequest(BaseModel):
    """Client cash-in request - what comes from API"""
    name: NonEmptyStr
    email: NonEmptyStr
    amount: Annotated[
        Decimal,
        Field(gt=Decimal("0"), lt=Decimal("1000000000000"), allow_inf_nan=False),
    ]
    source: NonEmptyStr
    userId: NonEmptyStr
    transactionCode: Optional[str] = None

    @field_validator("amount", mode="before")
    @classmethod
    def reject_boolean_amount(cls, value: Any) -> Any:
        # bool is an int subclass and would otherwise pass as 1 or 0
        if isinstance(value, bool):
            raise ValueError("amount must be a number")
        return value

    @field_validator("transactionCode", mode="before")
    @classmethod
    def blank_code_is_absent(cls, value: Any) -> Any:
        if value == "":
            return None
        return value


@dataclass(frozen=True)
class BrandProfile:
    """Branding used in rendered notifications."""

    name: str = "komyut"
    code_tag: str = "KOMYUT"
    biller_name: str = "Komyut Services PH"
    header_title: str = "Cash In Request"
    primary_color: str = "#8E4CB6"
    background_color: str = "#F6F1FF"


@dataclass(frozen=True)
class ChannelAccounts:
    """Where payers send money for channels that need an account.

    An empty value means the account is not configured.
    """

    gcash_number: str = ""
    maya_number: str = ""
    bank_name: str = ""
    bank_account_number: str = ""


@dataclass(frozen=True)
class NotificationDocument:
    recipient: str
    subject: str
    html_body: str
    transaction_code: str


@dataclass(frozen=True)
class DispatchResult:
    """Outcome of handing a notification to the mail relay."""

    ok: bool
    detail: str = ""
    reason: str = ""

    @classmethod
    def sent(cls, detail: str = "") -> "DispatchResult":
        return cls(ok=True, detail=detail)

    @classmethod
    def failed(cls, reason: str) -> "DispatchResult":
        return cls(ok=False, reason=reason)

import logging
import random
import string
from datetime import date
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from html import escape
from typing import Callable, Optional

from cashin_mailer.domain.channels import (
    InstructionBlock,
    InstructionContext,
    PaymentChannel,
    instructions_for,
)
from cashin_mailer.domain.models import (
    CURRENCY,
    SERVICE_FEE,
    BrandProfile,
    ChannelAccounts,
    NotificationDocument,
    PaymentNotificationRequest,
)
from cashin_mailer.domain.templates import (
    EMAIL_BODY,
    FONT_IMPORT,
    INSTRUCTION_NOTE,
    INSTRUCTION_ROW,
    SUMMARY_ROW,
    TOTAL_ROW,
)
from cashin_mailer.domain.validation import AmountFormatError

logger = logging.getLogger(__name__)

CODE_ALPHABET = string.ascii_uppercase + string.digits
CODE_LENGTH = 9
CENTS = Decimal("0.01")


def generate_transaction_code(tag: str, length: int = CODE_LENGTH) -> str:
    """Build a reference code like ``KOMYUT-AB12CD345``.

    Not cryptographically secure; the 36**9 space only has to avoid collisions
    at normal volume.
    """
    suffix = "".join(random.choices(CODE_ALPHABET, k=length))
    return f"{tag}-{suffix}"


def round_to_cents(value: Decimal) -> Decimal:
    """Round half-up to two decimal places."""
    try:
        quantized = Decimal(value).quantize(CENTS, rounding=ROUND_HALF_UP)
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise AmountFormatError(f"Cannot format amount {value!r}") from exc
    if not quantized.is_finite():
        raise AmountFormatError(f"Cannot format amount {value!r}")
    return quantized


def format_money(value: Decimal) -> str:
    """Format an amount as ``PHP 1234.50``."""
    return f"{CURRENCY} {round_to_cents(value):f}"


def format_display_date(day: date) -> str:
    """Format as ``October 19, 2026``."""
    return f"{day:%B} {day.day}, {day.year}"


class InstructionRenderer:
    def __init__(
        self,
        brand: BrandProfile,
        accounts: Optional[ChannelAccounts] = None,
        today: Callable[[], date] = date.today,
        code_generator: Optional[Callable[[str], str]] = None,
    ):
        self.brand = brand
        self.accounts = accounts or ChannelAccounts()
        self.today = today
        self.code_generator = code_generator or generate_transaction_code

    def subject_for(self, transaction_code: str) -> str:
        return f"[{self.brand.name}] Payment Instructions for {transaction_code}"

    def render(self, request: PaymentNotificationRequest) -> NotificationDocument:
        """Render the subject and HTML body for a validated request."""
        transaction_code = request.transactionCode or self.code_generator(self.brand.code_tag)
        today = self.today()

        # Round once so that base amount plus fee always equals the total
        amount = round_to_cents(request.amount)
        total_due = format_money(amount)
        base_amount = format_money(amount - SERVICE_FEE)
        service_fee = format_money(SERVICE_FEE)

        channel = PaymentChannel.from_source(request.source)
        block = instructions_for(
            channel,
            InstructionContext(
                source=request.source,
                reference_code=transaction_code,
                total_due=total_due,
                biller_name=self.brand.biller_name,
                accounts=self.accounts,
            ),
        )
        logger.debug(f"Rendering {channel.name} instructions for {transaction_code}")

        summary_rows = [
            SUMMARY_ROW.substitute(label="Name:", value=escape(request.name)),
            SUMMARY_ROW.substitute(label="User ID:", value=escape(request.userId)),
            SUMMARY_ROW.substitute(label="Reference Number:", value=escape(transaction_code)),
            SUMMARY_ROW.substitute(label="Date:", value=format_display_date(today)),
            SUMMARY_ROW.substitute(label="Amount:", value=base_amount),
            SUMMARY_ROW.substitute(label="Service Fee:", value=service_fee),
            TOTAL_ROW.substitute(label="Total Amount Due:", value=total_due),
        ]

        html_body = EMAIL_BODY.substitute(
            font_import=FONT_IMPORT,
            background_color=self.brand.background_color,
            primary_color=self.brand.primary_color,
            header_title=escape(self.brand.header_title),
            name=escape(request.name),
            summary_rows="\n".join(summary_rows),
            instructions_title=escape(block.title),
            instruction_rows=self._instruction_rows(block),
            year=today.year,
            brand_name=escape(self.brand.name),
        )

        return NotificationDocument(
            recipient=request.email,
            subject=self.subject_for(transaction_code),
            html_body=html_body,
            transaction_code=transaction_code,
        )

    @staticmethod
    def _instruction_rows(block: InstructionBlock) -> str:
        rows = [
            INSTRUCTION_ROW.substitute(label=escape(label), value=escape(value))
            for label, value in block.rows
        ]
        if block.note:
            rows.append(INSTRUCTION_NOTE.substitute(note=escape(block.note)))
        return "\n".join(rows)

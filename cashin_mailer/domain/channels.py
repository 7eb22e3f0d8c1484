"""
Payment channels a cash-in can be paid through and the instructions shown for each.

The set of channels is closed: ``PaymentChannel`` lists every channel with its own
instructions and ``GENERIC`` covers any source string we do not recognise. Each
member needs a builder in ``_BUILDERS``. Wallet and bank channels fall back to the
generic block while their account is not configured.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Optional

from cashin_mailer.domain.models import ChannelAccounts


class PaymentChannel(str, Enum):
    GCASH = "GCash"
    MAYA = "Maya"
    SEVEN_ELEVEN = "7-Eleven"
    BAYAD_CENTER = "Bayad Center"
    BANK_TRANSFER = "Bank Transfer"
    GENERIC = "Generic"

    @classmethod
    def from_source(cls, source: str) -> "PaymentChannel":
        """Match a client-supplied source string, falling back to GENERIC."""
        key = _normalize(source)
        for channel in cls:
            if channel is cls.GENERIC:
                continue
            if key == _normalize(channel.value):
                return channel
        return _ALIASES.get(key, cls.GENERIC)


def _normalize(value: str) -> str:
    return re.sub(r"[^a-z0-9]", "", value.lower())


_ALIASES = {
    "paymaya": PaymentChannel.MAYA,
    "711": PaymentChannel.SEVEN_ELEVEN,
    "cliqq": PaymentChannel.SEVEN_ELEVEN,
    "bayad": PaymentChannel.BAYAD_CENTER,
    "bank": PaymentChannel.BANK_TRANSFER,
    "instapay": PaymentChannel.BANK_TRANSFER,
}


@dataclass(frozen=True)
class InstructionContext:
    source: str
    reference_code: str
    total_due: str
    biller_name: str
    accounts: ChannelAccounts = field(default_factory=ChannelAccounts)


@dataclass(frozen=True)
class InstructionBlock:
    title: str
    rows: list[tuple[str, str]] = field(default_factory=list)
    note: Optional[str] = None


def _gcash(ctx: InstructionContext) -> InstructionBlock:
    if not ctx.accounts.gcash_number:
        return _generic(ctx)
    return InstructionBlock(
        title="Payment Instructions (GCash)",
        rows=[
            ("Account Name:", ctx.biller_name),
            ("GCash Number:", ctx.accounts.gcash_number),
            ("Message / Note:", ctx.reference_code),
            ("Amount to Send:", ctx.total_due),
        ],
        note=(
            "Open GCash, tap Send Money and send the exact amount to the number above. "
            "Type the reference number in the message field so we can match your payment."
        ),
    )


def _maya(ctx: InstructionContext) -> InstructionBlock:
    if not ctx.accounts.maya_number:
        return _generic(ctx)
    return InstructionBlock(
        title="Payment Instructions (Maya)",
        rows=[
            ("Account Name:", ctx.biller_name),
            ("Maya Number:", ctx.accounts.maya_number),
            ("Message / Note:", ctx.reference_code),
            ("Amount to Send:", ctx.total_due),
        ],
        note=(
            "In the Maya app choose Send Money, enter the number above and the exact "
            "amount, and add the reference number as the note."
        ),
    )


def _seven_eleven(ctx: InstructionContext) -> InstructionBlock:
    return InstructionBlock(
        title="Payment Instructions (7-Eleven CLiQQ)",
        rows=[
            ("Biller Name:", ctx.biller_name),
            ("CLiQQ Payment Code:", ctx.reference_code),
            ("Amount to Pay:", ctx.total_due),
        ],
        note=(
            "At any 7-Eleven CLiQQ kiosk select Bills Payment, search for the biller "
            "above and enter the payment code. Pay the printed slip at the counter."
        ),
    )


def _bayad_center(ctx: InstructionContext) -> InstructionBlock:
    return InstructionBlock(
        title="Payment Instructions (Bayad Center)",
        rows=[
            ("Biller Name:", ctx.biller_name),
            ("Account / Reference No.:", ctx.reference_code),
            ("Amount to Pay:", ctx.total_due),
        ],
        note="Fill out the Bayad Center payment form using the details above.",
    )


def _bank_transfer(ctx: InstructionContext) -> InstructionBlock:
    if not (ctx.accounts.bank_name and ctx.accounts.bank_account_number):
        return _generic(ctx)
    return InstructionBlock(
        title="Payment Instructions (Bank Transfer)",
        rows=[
            ("Bank:", ctx.accounts.bank_name),
            ("Account Name:", ctx.biller_name),
            ("Account Number:", ctx.accounts.bank_account_number),
            ("Transfer Reference:", ctx.reference_code),
            ("Amount to Transfer:", ctx.total_due),
        ],
        note=(
            "Transfers through InstaPay or PESONet are accepted. Put the transfer "
            "reference in the remarks field."
        ),
    )


def _generic(ctx: InstructionContext) -> InstructionBlock:
    return InstructionBlock(
        title=f"Payment Instructions ({ctx.source})",
        rows=[
            ("Biller Name:", ctx.biller_name),
            ("Reference Number:", ctx.reference_code),
            ("Total Amount Due:", ctx.total_due),
        ],
    )


_BUILDERS: dict[PaymentChannel, Callable[[InstructionContext], InstructionBlock]] = {
    PaymentChannel.GCASH: _gcash,
    PaymentChannel.MAYA: _maya,
    PaymentChannel.SEVEN_ELEVEN: _seven_eleven,
    PaymentChannel.BAYAD_CENTER: _bayad_center,
    PaymentChannel.BANK_TRANSFER: _bank_transfer,
    PaymentChannel.GENERIC: _generic,
}


def instructions_for(channel: PaymentChannel, ctx: InstructionContext) -> InstructionBlock:
    return _BUILDERS[channel](ctx)

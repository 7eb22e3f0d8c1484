import pytest

from cashin_mailer.domain.channels import (
    InstructionContext,
    PaymentChannel,
    _BUILDERS,
    instructions_for,
)
from cashin_mailer.domain.models import ChannelAccounts
from tests.conftest import TEST_ACCOUNTS


@pytest.fixture
def context():
    return InstructionContext(
        source="GCash",
        reference_code="KOMYUT-AB12CD345",
        total_due="PHP 110.00",
        biller_name="Komyut Services PH",
        accounts=TEST_ACCOUNTS,
    )


def test_every_channel_has_instructions():
    """Test that no channel is left without an instruction builder"""
    assert set(_BUILDERS) == set(PaymentChannel)


@pytest.mark.parametrize(
    "source, expected",
    [
        ("GCash", PaymentChannel.GCASH),
        ("gcash", PaymentChannel.GCASH),
        (" GCASH ", PaymentChannel.GCASH),
        ("Maya", PaymentChannel.MAYA),
        ("PayMaya", PaymentChannel.MAYA),
        ("7-Eleven", PaymentChannel.SEVEN_ELEVEN),
        ("7eleven", PaymentChannel.SEVEN_ELEVEN),
        ("Bayad Center", PaymentChannel.BAYAD_CENTER),
        ("bank transfer", PaymentChannel.BANK_TRANSFER),
    ],
)
def test_from_source_matches_known_channels(source, expected):
    assert PaymentChannel.from_source(source) is expected


@pytest.mark.parametrize("source", ["Coins.ph", "Cash", "", "Generic", "GCash2"])
def test_from_source_falls_back_to_generic(source):
    """Test that unrecognised sources use the generic instructions"""
    assert PaymentChannel.from_source(source) is PaymentChannel.GENERIC


def test_gcash_instructions_show_account_details(context):
    block = instructions_for(PaymentChannel.GCASH, context)

    assert block.title == "Payment Instructions (GCash)"
    assert ("GCash Number:", "0900 000 0001") in block.rows
    assert ("Account Name:", "Komyut Services PH") in block.rows
    assert ("Amount to Send:", "PHP 110.00") in block.rows
    assert block.note is not None


def test_generic_instructions_only_show_biller_reference_and_total(context):
    ctx = InstructionContext(
        source="Coins.ph",
        reference_code=context.reference_code,
        total_due=context.total_due,
        biller_name=context.biller_name,
    )

    block = instructions_for(PaymentChannel.GENERIC, ctx)

    assert block.title == "Payment Instructions (Coins.ph)"
    assert block.rows == [
        ("Biller Name:", "Komyut Services PH"),
        ("Reference Number:", "KOMYUT-AB12CD345"),
        ("Total Amount Due:", "PHP 110.00"),
    ]
    assert block.note is None


@pytest.mark.parametrize("channel", [c for c in PaymentChannel if c is not PaymentChannel.GENERIC])
def test_channel_instructions_include_reference_and_total(channel, context):
    """Test that every channel tells the payer the reference and the amount"""
    block = instructions_for(channel, context)
    values = [value for _, value in block.rows]

    assert "KOMYUT-AB12CD345" in values
    assert "PHP 110.00" in values
    assert channel.value in block.title


def test_gcash_instructions_use_configured_number(context):
    """Test that the GCash block shows the number from configuration"""
    ctx = InstructionContext(
        source="GCash",
        reference_code=context.reference_code,
        total_due=context.total_due,
        biller_name=context.biller_name,
        accounts=ChannelAccounts(gcash_number="0917 123 4567"),
    )

    block = instructions_for(PaymentChannel.GCASH, ctx)

    assert ("GCash Number:", "0917 123 4567") in block.rows


@pytest.mark.parametrize(
    "channel", [PaymentChannel.GCASH, PaymentChannel.MAYA, PaymentChannel.BANK_TRANSFER]
)
def test_unconfigured_account_falls_back_to_generic(channel, context):
    """Test that no payment destination is shown when none is configured"""
    ctx = InstructionContext(
        source=channel.value,
        reference_code=context.reference_code,
        total_due=context.total_due,
        biller_name=context.biller_name,
    )

    block = instructions_for(channel, ctx)

    assert block == instructions_for(PaymentChannel.GENERIC, ctx)
    assert [label for label, _ in block.rows] == [
        "Biller Name:",
        "Reference Number:",
        "Total Amount Due:",
    ]

from __future__ import annotations

from decimal import Decimal

from share_registry.services.reporting import calculate_ipf_details, calculate_report


def test_report_uses_fixed_multipliers() -> None:
    report = calculate_report(quantity=100, buy_amount=Decimal("1500"))

    assert report.expected_dividends == Decimal("250.00")
    assert report.bonus_allocation == 10
    assert report.remaining_dues == Decimal("1250.0")


def test_report_rounds_dividends_and_floors_bonus() -> None:
    report = calculate_report(quantity=19, buy_amount=0)

    assert report.expected_dividends == Decimal("47.50")
    assert report.bonus_allocation == 1
    assert report.remaining_dues == Decimal("0")


def test_remaining_dues_never_negative() -> None:
    assert calculate_report(quantity=1000, buy_amount=10).remaining_dues == Decimal("0")


def test_ipf_details_sum_history_and_bonus() -> None:
    details = calculate_ipf_details(dividends_history=[10, "2.5", Decimal("7.25")], bonus_ratio="0.5", quantity=7)

    assert details.dividends_received == Decimal("19.75")
    assert details.pending_dividends == Decimal("0")
    assert details.bonus_shares == 3


def test_ipf_details_defaults_to_zero() -> None:
    details = calculate_ipf_details()

    assert details.dividends_received == Decimal("0")
    assert details.bonus_shares == 0

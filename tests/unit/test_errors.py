from __future__ import annotations

from share_registry.api.errors import format_validation_errors


def test_format_validation_errors_drops_request_section() -> None:
    message = format_validation_errors(
        [
            {"loc": ("body", "panNumber"), "msg": "Field required"},
            {"loc": ("body", "shareHoldings", 0, "isinNumber"), "msg": "String should have at least 1 character"},
        ]
    )

    assert message == (
        "Validation failed: panNumber: Field required; "
        "shareHoldings.0.isinNumber: String should have at least 1 character"
    )


def test_format_validation_errors_without_location() -> None:
    assert format_validation_errors([{"loc": (), "msg": "Invalid JSON"}]) == "Validation failed: Invalid JSON"

from __future__ import annotations

from datetime import date, timedelta

import pytest

from share_registry.models import RenewalStatus
from share_registry.services.dmat_accounts import derive_renewal_status

TODAY = date(2025, 3, 1)


@pytest.mark.parametrize(
    ("offset", "expected"),
    [
        (-1, RenewalStatus.EXPIRED),
        (0, RenewalStatus.EXPIRING),
        (10, RenewalStatus.EXPIRING),
        (11, RenewalStatus.ACTIVE),
    ],
)
def test_derive_renewal_status(offset: int, expected: RenewalStatus) -> None:
    assert derive_renewal_status(TODAY + timedelta(days=offset), TODAY) is expected

from __future__ import annotations

import pytest

from share_registry.services.pagination import MAX_OFFSET, PageRequest


@pytest.mark.parametrize(
    ("page", "limit", "expected"),
    [
        (None, None, (1, 20)),
        ("2", "10", (2, 10)),
        ("0", "-5", (1, 20)),
        ("abc", "1.5", (1, 20)),
        (3, 1000, (3, 100)),
    ],
)
def test_page_request_build(page: object, limit: object, expected: tuple[int, int]) -> None:
    request = PageRequest.build(page=page, limit=limit)

    assert (request.page, request.limit) == expected


def test_offset() -> None:
    assert PageRequest(page=3, limit=10).offset == 20


def test_oversized_page_keeps_offset_within_bigint() -> None:
    request = PageRequest.build(page="99999999999999999999", limit="10")

    assert request.offset <= MAX_OFFSET
    assert request.page == MAX_OFFSET // 10 + 1


def test_oversized_page_with_unparsable_digits_falls_back() -> None:
    assert PageRequest.build(page="9" * 5000, limit=None).page == 1

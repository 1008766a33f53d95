"""Rate limit parsing and wiring tests."""

import pytest

from buurbak.api.rate_limits import DEFAULT_RATE_DEP, LOGIN_RATE_DEP, parse_rate
from buurbak.api.v1 import auth, lessor_calendar, rentals, trailers


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("100/minute", (100, 60)),
        ("5 / hour", (5, 3600)),
        ("20/days", (20, 86400)),
        ("7/fortnight", (7, 60)),
        ("lots", (10, 60)),
    ],
)
def test_parse_rate(value: str, expected: tuple[int, int]) -> None:
    assert parse_rate(value, fallback=(10, 60)) == expected


def test_default_limit_guards_trailer_rental_and_calendar_routes() -> None:
    for router in (trailers.router, rentals.router, lessor_calendar.router):
        assert DEFAULT_RATE_DEP in router.dependencies


def test_login_uses_its_own_limit() -> None:
    (route,) = [route for route in auth.router.routes if route.path == "/token"]
    assert LOGIN_RATE_DEP in route.dependencies
    assert DEFAULT_RATE_DEP not in route.dependencies

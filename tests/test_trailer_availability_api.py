"""Trailer listing, weekly template and exception API tests."""
from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _authenticate(client: AsyncClient, email: str, password: str) -> dict[str, str]:
    response = await client.post(
        "/api/v1/auth/token",
        data={"username": email, "password": password},
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert response.status_code == 200
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


async def _lessor_headers(client: AsyncClient, context: dict[str, object]) -> dict[str, str]:
    return await _authenticate(
        client, context["lessor_email"], context["password"]  # type: ignore[arg-type]
    )


async def test_create_trailer_with_weekly_template(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _lessor_headers(client, app_context)

    create_resp = await client.post(
        "/api/v1/trailers",
        json={
            "title": "Aanhanger met huif",
            "min_rental_days": 1,
            "max_rental_days": 7,
            "weekly_availability": [
                {
                    "day": "SUNDAY",
                    "available": False,
                    "time_slot_1_start": "09:00",
                    "time_slot_1_end": "12:00",
                },
                {
                    "day": "MONDAY",
                    "available": True,
                    "time_slot_1_start": "09:00",
                    "time_slot_1_end": "12:00",
                },
            ],
        },
        headers=headers,
    )
    assert create_resp.status_code == 201
    trailer = create_resp.json()
    assert trailer["owner_id"] == str(app_context["lessor_id"])

    weekly = await client.get(f"/api/v1/trailers/{trailer['id']}/weekly-availability")
    assert weekly.status_code == 200
    rows = weekly.json()
    assert [row["day"] for row in rows] == ["MONDAY", "SUNDAY"]
    assert rows[0]["time_slot_1_start"] == "09:00"
    # closed days keep no slots
    assert rows[1]["time_slot_1_start"] is None

    listing = await client.get("/api/v1/trailers", headers=headers)
    assert {item["title"] for item in listing.json()} == {
        "Aanhanger met huif",
        "Bakwagen 250x130",
    }


async def test_create_trailer_validation(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _lessor_headers(client, app_context)

    bad_day = await client.post(
        "/api/v1/trailers",
        json={"title": "X", "weekly_availability": [{"day": "FUNDAY"}]},
        headers=headers,
    )
    assert bad_day.status_code == 422

    bad_slot = await client.post(
        "/api/v1/trailers",
        json={
            "title": "X",
            "weekly_availability": [
                {"day": "MONDAY", "time_slot_1_start": "12:00", "time_slot_1_end": "09:00"}
            ],
        },
        headers=headers,
    )
    assert bad_slot.status_code == 422

    renter_headers = await _authenticate(
        client, app_context["renter_email"], app_context["password"]  # type: ignore[arg-type]
    )
    forbidden = await client.post("/api/v1/trailers", json={"title": "X"}, headers=renter_headers)
    assert forbidden.status_code == 403


async def test_unknown_trailer_is_not_found(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    missing = uuid.uuid4()
    assert (await client.get(f"/api/v1/trailers/{missing}")).status_code == 404
    assert (
        await client.get(f"/api/v1/trailers/{missing}/availability/2030-09-02")
    ).status_code == 404
    assert (
        await client.get(f"/api/v1/trailers/{missing}/weekly-availability")
    ).status_code == 404


async def test_bulk_weekly_update_and_slot_queries(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _lessor_headers(client, app_context)
    trailer_id = app_context["trailer_id"]

    update = await client.put(
        "/api/v1/lessor-calendar/availability",
        json={
            "trailer_ids": [str(trailer_id)],
            "weekly_availability": [
                {
                    "day": "MONDAY",
                    "available": True,
                    "time_slot_1_start": "09:00",
                    "time_slot_1_end": "12:00",
                },
                {"day": "SUNDAY", "available": False},
            ],
        },
        headers=headers,
    )
    assert update.status_code == 200
    assert update.json() == {"trailer_ids": [str(trailer_id)], "days_updated": 2}

    # 2030-09-02 is a Monday, 2030-09-03 a Tuesday without a row
    monday = await client.get(f"/api/v1/trailers/{trailer_id}/availability/2030-09-02")
    assert monday.json() == {"date": "2030-09-02", "status": "available"}
    tuesday = await client.get(f"/api/v1/trailers/{trailer_id}/availability/2030-09-03")
    assert tuesday.json()["status"] == "available"
    sunday = await client.get(f"/api/v1/trailers/{trailer_id}/availability/2030-09-08")
    assert sunday.json()["status"] == "unavailable"

    outside = await client.get(
        f"/api/v1/trailers/{trailer_id}/availability/2030-09-02/slots",
        params={"slot": "14:00-15:00"},
    )
    assert outside.status_code == 200
    body = outside.json()
    assert body["available"] is False
    assert body["day_status"] == "available"
    assert body["open_windows"] == ["09:00-12:00"]
    assert body["time_options"] == [
        "09:00", "09:30", "10:00", "10:30", "11:00", "11:30",
    ]

    morning = await client.get(
        f"/api/v1/trailers/{trailer_id}/availability/2030-09-02/slots",
        params={"slot": "morning"},
    )
    assert morning.json()["available"] is True
    assert morning.json()["slot"] == "morning"

    malformed = await client.get(
        f"/api/v1/trailers/{trailer_id}/availability/2030-09-02/slots",
        params={"slot": "brunch"},
    )
    assert malformed.status_code == 400

    # replacing a single day leaves the other rows in place
    second = await client.put(
        "/api/v1/lessor-calendar/availability",
        json={
            "trailer_ids": [str(trailer_id)],
            "weekly_availability": [{"day": "MONDAY", "available": False}],
        },
        headers=headers,
    )
    assert second.status_code == 200
    weekly = await client.get(f"/api/v1/trailers/{trailer_id}/weekly-availability")
    assert [(row["day"], row["available"]) for row in weekly.json()] == [
        ("MONDAY", False),
        ("SUNDAY", False),
    ]


async def test_bulk_weekly_update_requires_owning_every_trailer(
    app_context: dict[str, object],
) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _lessor_headers(client, app_context)

    response = await client.put(
        "/api/v1/lessor-calendar/availability",
        json={
            "trailer_ids": [
                str(app_context["trailer_id"]),
                str(app_context["other_trailer_id"]),
            ],
            "weekly_availability": [{"day": "MONDAY", "available": False}],
        },
        headers=headers,
    )
    assert response.status_code == 403

    weekly = await client.get(
        f"/api/v1/trailers/{app_context['trailer_id']}/weekly-availability"
    )
    assert weekly.json() == []

    duplicate = await client.put(
        "/api/v1/lessor-calendar/availability",
        json={
            "trailer_ids": [str(app_context["trailer_id"])],
            "weekly_availability": [{"day": "MONDAY"}, {"day": "MONDAY"}],
        },
        headers=headers,
    )
    assert duplicate.status_code == 422


async def test_exception_overrides_weekly_rule(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _lessor_headers(client, app_context)
    trailer_id = app_context["trailer_id"]

    await client.put(
        "/api/v1/lessor-calendar/availability",
        json={
            "trailer_ids": [str(trailer_id)],
            "weekly_availability": [{"day": "SUNDAY", "available": False}],
        },
        headers=headers,
    )

    upsert = await client.put(
        f"/api/v1/trailers/{trailer_id}/exceptions",
        json={
            "exception_date": "2030-09-08",
            "afternoon": True,
            "afternoon_start": "13:00",
            "afternoon_end": "15:00",
        },
        headers=headers,
    )
    assert upsert.status_code == 200
    assert upsert.json()["afternoon_start"] == "13:00"

    status_resp = await client.get(f"/api/v1/trailers/{trailer_id}/availability/2030-09-08")
    assert status_resp.json()["status"] == "available"

    inside = await client.get(
        f"/api/v1/trailers/{trailer_id}/availability/2030-09-08/slots",
        params={"slot": "13:30-14:30"},
    )
    assert inside.json()["available"] is True
    evening = await client.get(
        f"/api/v1/trailers/{trailer_id}/availability/2030-09-08/slots",
        params={"slot": "evening"},
    )
    assert evening.json()["available"] is False

    # upserting the same date replaces the row
    closed = await client.put(
        f"/api/v1/trailers/{trailer_id}/exceptions",
        json={"exception_date": "2030-09-08"},
        headers=headers,
    )
    assert closed.status_code == 200
    listing = await client.get(f"/api/v1/trailers/{trailer_id}/exceptions", headers=headers)
    assert len(listing.json()) == 1
    assert listing.json()[0]["afternoon"] is False
    status_resp = await client.get(f"/api/v1/trailers/{trailer_id}/availability/2030-09-08")
    assert status_resp.json()["status"] == "unavailable"

    deleted = await client.delete(
        f"/api/v1/trailers/{trailer_id}/exceptions/2030-09-08", headers=headers
    )
    assert deleted.status_code == 204
    again = await client.delete(
        f"/api/v1/trailers/{trailer_id}/exceptions/2030-09-08", headers=headers
    )
    assert again.status_code == 404


async def test_exception_requires_ownership(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _lessor_headers(client, app_context)
    response = await client.put(
        f"/api/v1/trailers/{app_context['other_trailer_id']}/exceptions",
        json={"exception_date": "2030-09-08", "morning": True},
        headers=headers,
    )
    assert response.status_code == 403


async def test_availability_range(app_context: dict[str, object]) -> None:
    client: AsyncClient = app_context["client"]  # type: ignore[assignment]
    headers = await _lessor_headers(client, app_context)
    trailer_id = app_context["trailer_id"]

    await client.post(
        "/api/v1/lessor-calendar/blocked-periods",
        json={
            "trailer_id": str(trailer_id),
            "start_date": "2030-09-03",
            "end_date": "2030-09-03",
        },
        headers=headers,
    )
    response = await client.get(
        f"/api/v1/trailers/{trailer_id}/availability",
        params={"date_from": "2030-09-02", "date_to": "2030-09-04"},
    )
    assert response.status_code == 200
    assert [item["status"] for item in response.json()["days"]] == [
        "available",
        "blocked",
        "available",
    ]

    reversed_range = await client.get(
        f"/api/v1/trailers/{trailer_id}/availability",
        params={"date_from": "2030-09-04", "date_to": "2030-09-02"},
    )
    assert reversed_range.status_code == 400

    too_long = await client.get(
        f"/api/v1/trailers/{trailer_id}/availability",
        params={"date_from": "2030-01-01", "date_to": "2031-12-31"},
    )
    assert too_long.status_code == 400

    default_window = await client.get(f"/api/v1/trailers/{trailer_id}/availability")
    assert len(default_window.json()["days"]) == 90

from __future__ import annotations

import asyncio
from datetime import time

from buurbak.core.config import get_settings
from buurbak.db.session import dispose_engine, get_sessionmaker
from buurbak.models.availability import DayOfWeek
from buurbak.models.user import UserRole
from buurbak.schemas.availability import WeeklyAvailabilityDay
from buurbak.services import trailer_service, user_service

EMAIL = "lessor@buurbak.local"
PASSWORD = "lessor123"

_WEEKDAY_TEMPLATE = [
    WeeklyAvailabilityDay(
        day=day,
        available=True,
        time_slot_1_start=time(8, 0),
        time_slot_1_end=time(12, 0),
        time_slot_2_start=time(13, 0),
        time_slot_2_end=time(18, 0),
    )
    for day in list(DayOfWeek)[:5]
] + [
    WeeklyAvailabilityDay(day=DayOfWeek.SATURDAY, available=True),
    WeeklyAvailabilityDay(day=DayOfWeek.SUNDAY, available=False),
]


async def main() -> None:
    settings = get_settings()
    sessionmaker = get_sessionmaker(settings.database_url)
    async with sessionmaker() as session:
        if await user_service.get_user_by_email(session, EMAIL) is not None:
            print(f"User {EMAIL} already exists")
            return

        lessor = await user_service.create_user(
            session,
            email=EMAIL,
            password=PASSWORD,
            first_name="Dev",
            last_name="Lessor",
            role=UserRole.LESSOR,
        )
        trailer = await trailer_service.create_trailer(
            session,
            owner=lessor,
            title="Open bakwagen 250x130",
            min_rental_days=1,
            max_rental_days=14,
            weekly_availability=_WEEKDAY_TEMPLATE,
        )
        print(f"Created lessor {EMAIL} / {PASSWORD} with trailer {trailer.id}")
    await dispose_engine(settings.database_url)


if __name__ == "__main__":
    asyncio.run(main())

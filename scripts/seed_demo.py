#!/usr/bin/env python3
"""
Seed script to create demo reservations
"""

import asyncio
from datetime import date, time, timedelta


def _next_open_day(start: date, closed_weekday: int) -> date:
    day = start + timedelta(days=1)
    while day.weekday() == closed_weekday:
        day += timedelta(days=1)
    return day


async def seed_demo_data():
    """Seed demo data for development"""
    from reservations_api.clock import SystemClock
    from reservations_api.config import settings
    from reservations_api.database import SessionLocal, engine, Base
    from reservations_api.models.reservation import Reservation
    from sqlalchemy import select, func

    # Create tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with SessionLocal() as db:
        result = await db.execute(select(func.count(Reservation.reservation_id)))
        if result.scalar():
            print("Demo data already exists. Skipping...")
            return

        day = _next_open_day(
            SystemClock(settings.restaurant_timezone).today(), settings.closed_weekday
        )
        guests = [
            ("Rick", "Sanchez", "202-555-0164", time(11, 0), 6, "booked"),
            ("Frank", "Palicky", "202-555-0153", time(12, 30), 1, "booked"),
            ("Bird", "Person", "808-555-0141", time(18, 0), 2, "seated"),
            ("Tiger", "Lion", "808-555-0140", time(19, 45), 4, "booked"),
            ("Anthony", "Charboneau", "620-646-8897", time(21, 30), 3, "cancelled"),
        ]

        for first_name, last_name, mobile_number, reservation_time, people, status in guests:
            db.add(Reservation(
                first_name=first_name,
                last_name=last_name,
                mobile_number=mobile_number,
                reservation_date=day,
                reservation_time=reservation_time,
                people=people,
                status=status,
            ))

        await db.commit()

        print(f"""
Demo data created successfully!

Date: {day.isoformat()}
Reservations: {len(guests)} created
""")


if __name__ == "__main__":
    asyncio.run(seed_demo_data())

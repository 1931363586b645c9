"""
Seed script -- populates the database with sample locations for reviewers.

Run with:
    python seed.py

Creates (around lower Manhattan):
  - 5 parks
  - 5 cafes
  - 4 fuel stations
"""

import asyncio

from nearby.config import settings
from nearby.domain.entities import Location
from nearby.infrastructure.database import (
    build_engine,
    build_session_factory,
    create_tables,
)
from nearby.infrastructure.repositories import SqlLocationStore


LOCATIONS = [
    # Parks
    {"name": "Battery Park", "address": "State St, New York, NY 10004", "latitude": 40.7033, "longitude": -74.0170, "category": "park"},
    {"name": "Washington Square Park", "address": "Washington Square, New York, NY 10012", "latitude": 40.7308, "longitude": -73.9973, "category": "park"},
    {"name": "Union Square Park", "address": "E 17th St & Broadway, New York, NY 10003", "latitude": 40.7359, "longitude": -73.9911, "category": "park"},
    {"name": "Madison Square Park", "address": "11 Madison Ave, New York, NY 10010", "latitude": 40.7420, "longitude": -73.9880, "category": "park"},
    {"name": "Central Park", "address": "New York, NY 10024", "latitude": 40.7829, "longitude": -73.9654, "category": "park"},
    # Cafes
    {"name": "Stumptown Coffee", "address": "18 W 29th St, New York, NY 10001", "latitude": 40.7456, "longitude": -73.9881, "category": "cafe"},
    {"name": "Joe Coffee", "address": "141 Waverly Pl, New York, NY 10014", "latitude": 40.7335, "longitude": -74.0005, "category": "cafe"},
    {"name": "La Colombe", "address": "270 Lafayette St, New York, NY 10012", "latitude": 40.7237, "longitude": -73.9967, "category": "cafe"},
    {"name": "Blue Bottle Coffee", "address": "450 W 15th St, New York, NY 10011", "latitude": 40.7424, "longitude": -74.0060, "category": "cafe"},
    {"name": "Cafe Grumpy", "address": "224 W 20th St, New York, NY 10011", "latitude": 40.7428, "longitude": -73.9976, "category": "cafe"},
    # Fuel
    {"name": "Mobil Hudson St", "address": "290 Hudson St, New York, NY 10013", "latitude": 40.7253, "longitude": -74.0074, "category": "fuel"},
    {"name": "BP West Side Hwy", "address": "1 West St, New York, NY 10004", "latitude": 40.7060, "longitude": -74.0164, "category": "fuel"},
    {"name": "Shell 10th Ave", "address": "574 10th Ave, New York, NY 10036", "latitude": 40.7598, "longitude": -73.9960, "category": "fuel"},
    {"name": "Sunoco Jersey City", "address": "Marin Blvd, Jersey City, NJ 07302", "latitude": 40.7195, "longitude": -74.0431, "category": "fuel"},
]


async def seed():
    engine = build_engine(settings)
    await create_tables(engine)
    session_factory = build_session_factory(engine)

    try:
        async with session_factory() as session:
            store = SqlLocationStore(session)

            # Check if already seeded
            if await store.count() > 0:
                print("Database already seeded. Skipping.")
                return

            for loc in LOCATIONS:
                await store.create(Location(**loc))

            await session.commit()
            print(f"  Created {len(LOCATIONS)} locations")
            print("\nSeed complete!")
    finally:
        await engine.dispose()


async def main():
    print("Seeding database...")
    await seed()


if __name__ == "__main__":
    asyncio.run(main())

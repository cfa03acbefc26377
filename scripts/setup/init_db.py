# scripts/setup/init_db.py
"""
Initialize database — creates all tables and seeds the parking spots.
Run once before first launch, or after changing CAR_SPOTS / BIKE_SPOTS.
Usage: python scripts/setup/init_db.py
"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", ".."))

from parkit.database import SessionLocal, create_tables, engine
from parkit.dao.parking_spot_dao import ParkingSpotDAO
from parkit.config import settings
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError


def main():
    print("Park-It DB Initialization")
    print("=" * 40)
    print(f"Database: {settings.DATABASE_URL}")

    # Test connection
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))
        print("Database connection OK")
    except SQLAlchemyError as e:
        print(f"Cannot connect to database: {e}")
        sys.exit(1)

    # Create all tables
    print("\nCreating tables...")
    create_tables()
    print("All tables created")

    # Seed spots
    db = SessionLocal()
    try:
        dao = ParkingSpotDAO(db)
        created = dao.init_parking_spots(settings.CAR_SPOTS, settings.BIKE_SPOTS)
        spots = dao.get_parking_spots()
        print(f"\nParking spots ({len(spots)} total, {created} new):")
        for spot in spots:
            state = "free" if spot.available else "occupied"
            print(f"   {spot.id:>3}  {spot.parking_type.value:<5} {state}")
    finally:
        db.close()

    print("\nDatabase ready! You can now start the backend:")
    print(f"   uvicorn parkit.main:app --host {settings.BACKEND_IP} --port {settings.BACKEND_PORT} --reload")
    print("or the attendant shell:")
    print("   parkit-shell")


if __name__ == "__main__":
    main()

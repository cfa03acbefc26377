# parkit/dao/parking_spot_dao.py
"""
Spot store: next-available lookup and availability updates on the parking table.
Every write commits on its own; failures are rolled back and reported as False.
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from parkit.models.parking_spot import ParkingSpot, ParkingType
from parkit.utils.logger import get_logger

logger = get_logger(__name__)


class ParkingSpotDAO:
    def __init__(self, db: Session):
        self.db = db

    def get_next_available_slot(self, parking_type: ParkingType) -> Optional[int]:
        """Lowest free spot number for the type, or None when the type is full."""
        spot = (
            self.db.query(ParkingSpot)
            .filter(ParkingSpot.parking_type == parking_type, ParkingSpot.available == True)  # noqa: E712
            .order_by(ParkingSpot.id)
            .first()
        )
        return spot.id if spot else None

    def update_parking(self, parking_spot) -> bool:
        try:
            updated = (
                self.db.query(ParkingSpot)
                .filter(ParkingSpot.id == parking_spot.id)
                .update({ParkingSpot.available: parking_spot.available})
            )
            self.db.commit()
            return updated == 1
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"[Spot] Error updating parking spot {parking_spot.id}: {e}", exc_info=True)
            return False

    def get_parking_spots(self, parking_type: Optional[ParkingType] = None) -> list:
        q = self.db.query(ParkingSpot)
        if parking_type:
            q = q.filter(ParkingSpot.parking_type == parking_type)
        return q.order_by(ParkingSpot.id).all()

    def init_parking_spots(self, car_count: int, bike_count: int) -> int:
        """
        Seed the fixed pool: car spots are numbered first, then bike spots.
        Existing spots are left untouched. Returns the number of spots created.
        """
        layout = [ParkingType.CAR] * car_count + [ParkingType.BIKE] * bike_count
        existing = {row.id for row in self.db.query(ParkingSpot.id).all()}
        created = 0
        for number, parking_type in enumerate(layout, start=1):
            if number in existing:
                continue
            self.db.add(ParkingSpot(id=number, parking_type=parking_type, available=True))
            created += 1
        self.db.commit()
        logger.info(f"[Spot] Seeded {created} parking spots ({car_count} car / {bike_count} bike)")
        return created

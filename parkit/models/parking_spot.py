# parkit/models/parking_spot.py
"""
Parking spot table — the fixed pool of spots in the facility.
Seeded once by init_parking_spots(); only the availability flag changes afterwards.
"""

import enum

from sqlalchemy import Column, Integer, Boolean, Enum
from parkit.database import Base


class ParkingType(str, enum.Enum):
    CAR = "CAR"
    BIKE = "BIKE"


class ParkingSpot(Base):
    __tablename__ = "parking"

    id = Column("parking_number", Integer, primary_key=True, autoincrement=False)
    parking_type = Column("type", Enum(ParkingType), nullable=False, index=True)
    available = Column(Boolean, default=True, nullable=False)

    def __repr__(self):
        return f"<ParkingSpot {self.id} type={self.parking_type} available={self.available}>"

# parkit/models/ticket.py
"""
Ticket table — one row per parking session.
Open tickets (out_time NULL) are vehicles currently parked; closed ones are
kept as history and drive the recurring-user discount.
"""

from sqlalchemy import Column, Integer, String, DateTime, Float, ForeignKey
from sqlalchemy.orm import relationship
from parkit.database import Base


class Ticket(Base):
    __tablename__ = "ticket"

    id = Column(Integer, primary_key=True, autoincrement=True)
    parking_number = Column(Integer, ForeignKey("parking.parking_number"), nullable=False)
    vehicle_reg_number = Column(String(10), nullable=False, index=True)
    price = Column(Float, default=0, nullable=False)
    in_time = Column(DateTime, nullable=False)   # naive UTC
    out_time = Column(DateTime)                  # naive UTC, NULL while the vehicle is parked

    parking_spot = relationship("ParkingSpot", lazy="joined")

    def __repr__(self):
        return f"<Ticket {self.id} plate={self.vehicle_reg_number} spot={self.parking_number}>"

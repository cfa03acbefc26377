from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional


class EntryRequest(BaseModel):
    vehicle_type: int = Field(description="1 = CAR, 2 = BIKE")
    plate_number: str


class ExitRequest(BaseModel):
    plate_number: str


class TicketOut(BaseModel):
    id: Optional[int] = None
    vehicle_reg_number: str
    parking_number: int
    parking_type: str
    price: float
    in_time: datetime
    out_time: Optional[datetime]

    @classmethod
    def from_ticket(cls, ticket):
        return cls(
            id=ticket.id,
            vehicle_reg_number=ticket.vehicle_reg_number,
            parking_number=ticket.parking_spot.id,
            parking_type=ticket.parking_spot.parking_type.value,
            price=ticket.price,
            in_time=ticket.in_time,
            out_time=ticket.out_time,
        )

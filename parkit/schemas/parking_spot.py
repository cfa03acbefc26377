from pydantic import BaseModel

from parkit.models.parking_spot import ParkingType


class ParkingSpotOut(BaseModel):
    id: int
    parking_type: ParkingType
    available: bool

    class Config:
        from_attributes = True

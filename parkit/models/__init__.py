# Park-It — Database Models
# Import all models here for SQLAlchemy discovery

from parkit.models.parking_spot import ParkingSpot, ParkingType   # noqa
from parkit.models.ticket import Ticket                           # noqa

# parkit/cli.py
"""
Interactive console shell for the parking attendant.
Usage: parkit-shell [--init-db]   (or: python -m parkit.cli)
"""

import argparse

from parkit.config import settings
from parkit.dao.parking_spot_dao import ParkingSpotDAO
from parkit.dao.ticket_dao import TicketDAO
from parkit.database import SessionLocal, create_tables
from parkit.exceptions import ParkingError
from parkit.services.parking_service import ParkingService
from parkit.utils.input_reader import ConsoleInputReader
from parkit.utils.logger import get_logger

logger = get_logger(__name__)

MENU = """
Please select an option. Simply enter the number to choose an action
1 New Vehicle Entering - Allocate Parking Space
2 Vehicle Exiting - Generate Ticket Price
3 Shutdown System"""


def run_shell(service: ParkingService, reader: ConsoleInputReader):
    print("Welcome to Parking System!")
    while True:
        print(MENU)
        try:
            option = reader.read_selection()
        except EOFError:
            option = 3
        try:
            if option == 1:
                print("Please select vehicle type from menu\n1 CAR\n2 BIKE")
                ticket = service.process_incoming_vehicle()
                if ticket is None:
                    print("No parking slot available for this vehicle type, please try later")
                else:
                    print("Generated Ticket and saved in DB")
                    print(f"Please park your vehicle in spot number: {ticket.parking_spot.id}")
                    print(f"Recorded in-time for vehicle number: {ticket.vehicle_reg_number} "
                          f"is: {ticket.in_time:%Y-%m-%d %H:%M:%S} UTC")
            elif option == 2:
                ticket = service.process_exiting_vehicle()
                if ticket is None:
                    print("Unable to update ticket information. Error occurred")
                else:
                    print(f"Please pay the parking fare: {ticket.price:.2f}")
                    print(f"Recorded out-time for vehicle number: {ticket.vehicle_reg_number} "
                          f"is: {ticket.out_time:%Y-%m-%d %H:%M:%S} UTC")
            elif option == 3:
                print("Exiting from the system!")
                return
            else:
                print("Unsupported option. Please enter a number corresponding to the provided menu")
        except ParkingError as e:
            logger.warning(f"[Shell] {type(e).__name__}: {e}")
            print(f"Unable to process vehicle: {e}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Park-It interactive parking shell")
    parser.add_argument("--init-db", action="store_true",
                        help="create tables and seed parking spots before starting")
    args = parser.parse_args(argv)

    db = SessionLocal()
    try:
        if args.init_db:
            create_tables()
            ParkingSpotDAO(db).init_parking_spots(settings.CAR_SPOTS, settings.BIKE_SPOTS)
        reader = ConsoleInputReader()
        service = ParkingService(reader, ParkingSpotDAO(db), TicketDAO(db))
        run_shell(service, reader)
    finally:
        db.close()


if __name__ == "__main__":
    main()

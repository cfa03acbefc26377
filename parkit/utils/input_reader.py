# parkit/utils/input_reader.py
"""
Input sources for the parking workflow.
ConsoleInputReader reads from the interactive shell; RequestInputReader
replays values taken from an API request body.
"""

import sys

from parkit.exceptions import InvalidSelection
from parkit.utils.logger import get_logger

logger = get_logger(__name__)


def _clean_plate(value) -> str:
    plate = (value or "").strip()
    if not plate:
        raise InvalidSelection("Invalid input provided")
    return plate


class ConsoleInputReader:
    def __init__(self, stream=None):
        self.stream = stream or sys.stdin

    def read_selection(self) -> int:
        """Returns the typed number, or -1 when the line is not a number."""
        line = self.stream.readline()
        if not line:
            raise EOFError("Input stream closed")
        try:
            return int(line.strip())
        except ValueError:
            logger.error(f"Error while reading user input from Shell: {line.strip()!r}")
            print("Error reading input. Please enter valid number for proceeding further")
            return -1

    def read_vehicle_registration_number(self) -> str:
        print("Please type the vehicle registration number and press enter key")
        return _clean_plate(self.stream.readline())


class RequestInputReader:
    def __init__(self, plate_number: str, vehicle_type: int = -1):
        self.plate_number = plate_number
        self.vehicle_type = vehicle_type

    def read_selection(self) -> int:
        return self.vehicle_type

    def read_vehicle_registration_number(self) -> str:
        return _clean_plate(self.plate_number)

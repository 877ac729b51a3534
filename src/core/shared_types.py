"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    IN_PROGRESS = "in progress"
    CONCLUDED = "concluded"


# --- NOTE: The domain layer (src/chess/pieces.py) has its own Color enum.
# --- These string versions are what crosses the API / DB boundary.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"

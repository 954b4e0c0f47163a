"""Domain models for the pawn shop inventory.

Devices are in-memory (Pydantic) models; the shop owns them and keeps the
running cash balance. Nothing here knows about the console.
"""

__all__ = [
    "device",
    "pawn_shop",
]

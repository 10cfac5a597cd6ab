"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Optional


def normalize_room_id(room_id) -> Optional[str]:
    """
    Canonical string form of a client-supplied room id.
    
    Clients may send the id as a number or a padded string. Returns None for
    anything that cannot be a room id.
    """
    if isinstance(room_id, bool) or room_id is None:
        return None
    if isinstance(room_id, int):
        room_id = str(room_id)
    if not isinstance(room_id, str):
        return None

    room_id = room_id.strip()
    if not (room_id.isascii() and room_id.isdigit()):
        return None
    return room_id

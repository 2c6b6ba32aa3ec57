"""User domain model."""

from dataclasses import dataclass
from datetime import date


@dataclass
class User:
    """Registered owner of cost entries. The id is chosen by the caller."""

    user_id: int
    first_name: str
    last_name: str
    birthday: date

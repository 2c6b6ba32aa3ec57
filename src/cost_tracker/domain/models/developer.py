"""Developer (team member) model."""

from dataclasses import dataclass


@dataclass
class Developer:
    first_name: str
    last_name: str

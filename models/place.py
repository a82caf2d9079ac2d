from dataclasses import dataclass


@dataclass
class Place:
    id: int
    name: str

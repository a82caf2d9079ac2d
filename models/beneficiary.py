from dataclasses import dataclass


@dataclass
class Beneficiary:
    id: int
    name: str

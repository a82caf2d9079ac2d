from dataclasses import dataclass
from typing import Optional


@dataclass
class PaymentType:
    name: str
    bank: str = ""
    issuer: str = ""
    issue_date: str = ""        # free text, usually 'YYYY-MM-DD'
    expiration_date: str = ""
    id: Optional[int] = None

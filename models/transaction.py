from dataclasses import dataclass
from typing import Optional

from utils.constants import TYPE_EXPENSE, TYPE_INCOME


@dataclass
class Transaction:
    amount: float
    date: str                           # 'YYYY-MM-DD'
    category_id: Optional[int] = None
    payment_type_id: Optional[int] = None
    comment: str = ""
    type_id: int = TYPE_EXPENSE         # 0 = expense, 1 = income
    place_id: Optional[int] = None
    beneficiary_id: Optional[int] = None
    id: Optional[int] = None
    category_name: str = ""
    payment_type_name: str = ""
    place_name: Optional[str] = None
    beneficiary_name: Optional[str] = None

    @property
    def is_income(self) -> bool:
        return self.type_id == TYPE_INCOME

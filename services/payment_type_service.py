from database.payment_type_dao import PaymentTypeDAO
from database.result import DbResult, ResultKind
from models.payment_type import PaymentType
from utils.validators import is_valid_name


class PaymentTypeService:
    def __init__(self, payment_type_dao: PaymentTypeDAO):
        self._dao = payment_type_dao

    def get_all(self) -> list[PaymentType]:
        return self._dao.get_all()

    def get_names(self) -> list[str]:
        return self._dao.get_all_names()

    def create(
        self,
        name: str,
        bank: str = "",
        issuer: str = "",
        issue_date: str = "",
        expiration_date: str = "",
    ) -> DbResult:
        name = self._validate_name(name)
        pt = PaymentType(
            name=name,
            bank=bank.strip(),
            issuer=issuer.strip(),
            issue_date=issue_date.strip(),
            expiration_date=expiration_date.strip(),
        )
        return self._dao.add(pt)

    def update(self, pt: PaymentType) -> DbResult:
        pt.name = self._validate_name(pt.name, exclude_id=pt.id)
        return self._dao.update(pt)

    def delete(self, payment_type_id: int) -> DbResult:
        result = self._dao.delete(payment_type_id)
        if result.kind is ResultKind.CONSTRAINT_VIOLATION:
            return result.with_message(
                "This payment method is associated with existing transactions "
                "and cannot be deleted."
            )
        return result

    def _validate_name(self, name: str, exclude_id: int | None = None) -> str:
        if not is_valid_name(name):
            raise ValueError("Payment type name cannot be empty.")
        name = name.strip()
        existing = [pt for pt in self._dao.get_all() if pt.id != exclude_id]
        if any(pt.name.lower() == name.lower() for pt in existing):
            raise ValueError(f"A payment type named '{name}' already exists.")
        return name

from database.lookup_dao import NameLookupDAO
from models.beneficiary import Beneficiary


class BeneficiaryDAO(NameLookupDAO):
    table = "beneficiaries"
    model = Beneficiary

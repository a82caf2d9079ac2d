from database.lookup_dao import NameLookupDAO
from models.category import Category


class CategoryDAO(NameLookupDAO):
    table = "categories"
    model = Category

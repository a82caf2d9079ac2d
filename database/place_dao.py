from database.lookup_dao import NameLookupDAO
from models.place import Place


class PlaceDAO(NameLookupDAO):
    table = "places"
    model = Place

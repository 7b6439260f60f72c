from models.database import Base, SessionLocal, get_db, init_db
from models.domain import CountryCode, ProductBrandMapping, Source

__all__ = [
    "Base",
    "SessionLocal",
    "get_db",
    "init_db",
    "ProductBrandMapping",
    "CountryCode",
    "Source",
]

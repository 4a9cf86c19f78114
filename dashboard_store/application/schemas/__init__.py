from .base import IsoDate, Number, RecordSchema, today_iso
from .customer import CustomerCreate, CustomerRecord
from .product import ProductCreate, ProductRecord
from .transaction import TransactionCreate, TransactionRecord
from .user import SessionUser, UserCreate, UserRecord

__all__ = [
    "IsoDate",
    "Number",
    "RecordSchema",
    "today_iso",
    "CustomerCreate",
    "CustomerRecord",
    "ProductCreate",
    "ProductRecord",
    "TransactionCreate",
    "TransactionRecord",
    "SessionUser",
    "UserCreate",
    "UserRecord",
]

from .common import ActivityStatus
from .customer import Customer
from .product import Product, ProductCategory, ProductStatus
from .query import ALL, RecordQuery
from .transaction import Transaction, TransactionStatus
from .user import User, UserRole

__all__ = [
    "ActivityStatus",
    "Customer",
    "Product",
    "ProductCategory",
    "ProductStatus",
    "ALL",
    "RecordQuery",
    "Transaction",
    "TransactionStatus",
    "User",
    "UserRole",
]

"""Built-in sample records used the first time a collection has no stored data.

Each factory draws fresh ids, so two calls never share identifiers.
"""

from dashboard_store.domain.entities import (
    ActivityStatus,
    Customer,
    Product,
    ProductCategory,
    ProductStatus,
    Transaction,
    TransactionStatus,
    User,
    UserRole,
)
from dashboard_store.domain.identifiers import generate_id


def sample_customers() -> list[Customer]:
    rows = [
        ("John Doe", "john@example.com", ActivityStatus.ACTIVE, 2456.00, "2023-05-01"),
        ("Jane Smith", "jane@example.com", ActivityStatus.ACTIVE, 1789.00, "2023-05-03"),
        ("Robert Johnson", "robert@example.com", ActivityStatus.INACTIVE, 890.00, "2023-04-15"),
        ("Emily Davis", "emily@example.com", ActivityStatus.ACTIVE, 3421.00, "2023-05-07"),
        ("Michael Wilson", "michael@example.com", ActivityStatus.ACTIVE, 1245.00, "2023-05-02"),
        ("Sarah Brown", "sarah@example.com", ActivityStatus.INACTIVE, 567.00, "2023-04-10"),
        ("David Miller", "david@example.com", ActivityStatus.ACTIVE, 2890.00, "2023-05-05"),
        ("Lisa Taylor", "lisa@example.com", ActivityStatus.ACTIVE, 1678.00, "2023-05-04"),
        ("James Anderson", "james@example.com", ActivityStatus.INACTIVE, 432.00, "2023-04-20"),
        ("Jennifer Thomas", "jennifer@example.com", ActivityStatus.ACTIVE, 3210.00, "2023-05-06"),
    ]
    return [
        Customer(id=generate_id(), name=name, email=email, status=status, spent=spent, last_order=last_order)
        for name, email, status, spent, last_order in rows
    ]


def sample_products() -> list[Product]:
    return [
        Product(
            id=generate_id(),
            name="Wireless Headphones",
            description="Premium noise-cancelling wireless headphones with 30-hour battery life.",
            price=199.99,
            category=ProductCategory.ELECTRONICS,
            stock=45,
            status=ProductStatus.IN_STOCK,
            created_at="2023-04-15",
        ),
        Product(
            id=generate_id(),
            name="Smart Watch",
            description="Fitness tracker with heart rate monitoring and sleep analysis.",
            price=149.99,
            category=ProductCategory.ELECTRONICS,
            stock=28,
            status=ProductStatus.IN_STOCK,
            created_at="2023-04-20",
        ),
        Product(
            id=generate_id(),
            name="Bluetooth Speaker",
            description="Portable waterproof speaker with 360-degree sound.",
            price=79.99,
            category=ProductCategory.ELECTRONICS,
            stock=5,
            status=ProductStatus.LOW_STOCK,
            created_at="2023-04-25",
        ),
        Product(
            id=generate_id(),
            name="Laptop Backpack",
            description="Water-resistant backpack with anti-theft features and USB charging port.",
            price=59.99,
            category=ProductCategory.ACCESSORIES,
            stock=0,
            status=ProductStatus.OUT_OF_STOCK,
            created_at="2023-05-01",
        ),
        Product(
            id=generate_id(),
            name="Wireless Mouse",
            description="Ergonomic wireless mouse with adjustable DPI settings.",
            price=29.99,
            category=ProductCategory.ELECTRONICS,
            stock=62,
            status=ProductStatus.IN_STOCK,
            created_at="2023-05-05",
        ),
    ]


def sample_transactions() -> list[Transaction]:
    rows = [
        ("2023-05-01", "John Doe", 245.99, TransactionStatus.COMPLETED, "Credit Card"),
        ("2023-05-02", "Jane Smith", 125.50, TransactionStatus.COMPLETED, "PayPal"),
        ("2023-05-03", "Robert Johnson", 450.00, TransactionStatus.PENDING, "Bank Transfer"),
        ("2023-05-04", "Emily Davis", 89.99, TransactionStatus.FAILED, "Credit Card"),
        ("2023-05-05", "Michael Wilson", 320.75, TransactionStatus.COMPLETED, "PayPal"),
    ]
    return [
        Transaction(
            id=generate_id(),
            date=day,
            customer=customer,
            amount=amount,
            status=status,
            payment_method=method,
        )
        for day, customer, amount, status, method in rows
    ]


def sample_users() -> list[User]:
    rows = [
        ("John Doe", "john@example.com", UserRole.ADMIN, ActivityStatus.ACTIVE, "2023-05-01"),
        ("Jane Smith", "jane@example.com", UserRole.EDITOR, ActivityStatus.ACTIVE, "2023-05-02"),
        ("Robert Johnson", "robert@example.com", UserRole.VIEWER, ActivityStatus.INACTIVE, "2023-04-15"),
        ("Emily Davis", "emily@example.com", UserRole.EDITOR, ActivityStatus.ACTIVE, "2023-05-03"),
        ("Michael Wilson", "michael@example.com", UserRole.VIEWER, ActivityStatus.ACTIVE, "2023-05-01"),
    ]
    return [
        User(id=generate_id(), name=name, email=email, role=role, status=status, last_login=last_login)
        for name, email, role, status, last_login in rows
    ]

"""ORM Models — SQLAlchemy declarative models for customers, orders and payments.

Invariants:
    - All models inherit from Base (db/base.py)
    - Customer is the owner; orders and payments reference it by customer_id

Design Decisions:
    - One file per entity
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from tiffin.models.customer import Customer  # noqa: F401
from tiffin.models.order import Order  # noqa: F401
from tiffin.models.payment import Payment  # noqa: F401

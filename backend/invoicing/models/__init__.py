"""ORM Models — SQLAlchemy declarative models for customers, invoices and users.

Invariants:
    - All models inherit from Base (db/base.py)
    - Invoice.customer_id references Customer.id (integrity enforced by the database)

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from invoicing.models.customer import Customer  # noqa: F401
from invoicing.models.invoice import Invoice  # noqa: F401
from invoicing.models.user import User  # noqa: F401

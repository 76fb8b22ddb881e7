"""Initial schema — customers, orders, payments.

Revision ID: 001_initial
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_initial"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
    ]


def upgrade() -> None:
    op.create_table(
        "customers",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column("phone", sa.String(11), nullable=False),
        sa.Column("address", sa.String(100), nullable=False),
        sa.Column("default_item", sa.String(20), nullable=False),
        sa.Column("default_price", sa.Float, nullable=False),
        sa.Column("default_quantity", sa.Integer, nullable=False),
        sa.Column("payment_system", sa.String(10), nullable=False),
        sa.Column("default_off_days", sa.JSON, nullable=False),
        sa.Column("active", sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column("access_key_hash", sa.String(64), nullable=True),
        sa.Column("access_key_expires_at", sa.DateTime(timezone=True), nullable=True),
        *_timestamps(),
        sa.UniqueConstraint("phone", name="uq_customers_phone"),
    )
    op.create_index("ix_customers_name", "customers", ["name"])
    op.create_index("ix_customers_active", "customers", ["active"])
    op.create_index("ix_customers_access_key_hash", "customers", ["access_key_hash"])
    op.create_index("ix_customers_updated_at", "customers", ["updated_at"])

    op.create_table(
        "orders",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column(
            "customer_id", sa.Uuid,
            sa.ForeignKey("customers.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("date", sa.Date, nullable=False),
        sa.Column("item", sa.String(20), nullable=False),
        sa.Column("price", sa.Float, nullable=False),
        sa.Column("quantity", sa.Integer, nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_orders_customer_id", "orders", ["customer_id"])
    op.create_index("ix_orders_date", "orders", ["date"])
    op.create_index("ix_orders_updated_at", "orders", ["updated_at"])

    op.create_table(
        "payments",
        sa.Column("id", sa.Uuid, primary_key=True),
        sa.Column(
            "customer_id", sa.Uuid,
            sa.ForeignKey("customers.id", ondelete="CASCADE"), nullable=False,
        ),
        sa.Column("amount", sa.Float, nullable=False),
        sa.Column("note", sa.String(200), nullable=True),
        *_timestamps(),
    )
    op.create_index("ix_payments_customer_id", "payments", ["customer_id"])
    op.create_index("ix_payments_updated_at", "payments", ["updated_at"])


def downgrade() -> None:
    op.drop_table("payments")
    op.drop_table("orders")
    op.drop_table("customers")

"""Initial pet shop schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

ACTIVE_SLOT_PREDICATE = "status IN ('Agendado', 'Confirmado', 'EmAndamento')"


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    op.create_table(
        "addresses",
        sa.Column("cep", sa.String(length=16), nullable=False),
        sa.Column("street", sa.String(length=255), nullable=False, server_default=""),
        sa.Column(
            "neighborhood", sa.String(length=120), nullable=False, server_default=""
        ),
        sa.Column("city", sa.String(length=120), nullable=False, server_default=""),
        sa.Column("state", sa.String(length=60), nullable=False, server_default=""),
        sa.PrimaryKeyConstraint("cep", name="pk_addresses"),
    )

    op.create_table(
        "accounts",
        sa.Column("cpf", sa.String(length=14), nullable=False),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120)),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("mobile_phone", sa.String(length=32)),
        sa.Column(
            "cep",
            sa.String(length=16),
            sa.ForeignKey(
                "addresses.cep",
                ondelete="SET NULL",
                name="fk_accounts_cep_addresses",
            ),
        ),
        sa.Column("number", sa.String(length=20)),
        sa.Column("complement", sa.String(length=120)),
        sa.Column(
            "is_logged_in", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("avatar", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("cpf", name="pk_accounts"),
        sa.UniqueConstraint("email", name="uq_accounts_email"),
    )

    op.create_table(
        "staff",
        sa.Column("staff_id", sa.String(length=64), nullable=False),
        sa.Column("first_name", sa.String(length=120), nullable=False),
        sa.Column("last_name", sa.String(length=120), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("hashed_password", sa.String(length=255), nullable=False),
        sa.Column("role", sa.String(length=32), nullable=False),
        sa.Column("phone", sa.String(length=32)),
        sa.Column(
            "cep",
            sa.String(length=16),
            sa.ForeignKey(
                "addresses.cep", ondelete="SET NULL", name="fk_staff_cep_addresses"
            ),
        ),
        sa.Column("number", sa.String(length=20)),
        sa.Column("complement", sa.String(length=120)),
        sa.Column(
            "is_logged_in", sa.Boolean(), nullable=False, server_default=sa.false()
        ),
        sa.Column("avatar", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("staff_id", name="pk_staff"),
        sa.UniqueConstraint("email", name="uq_staff_email"),
    )

    op.create_table(
        "stores",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("image", sa.String(length=255), nullable=False),
        sa.Column(
            "cep",
            sa.String(length=16),
            sa.ForeignKey(
                "addresses.cep", ondelete="SET NULL", name="fk_stores_cep_addresses"
            ),
        ),
        sa.Column("number", sa.String(length=20)),
        sa.Column("complement", sa.String(length=120)),
        sa.Column(
            "staff_id",
            sa.String(length=64),
            sa.ForeignKey(
                "staff.staff_id", ondelete="SET NULL", name="fk_stores_staff_id_staff"
            ),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_stores"),
    )

    op.create_table(
        "products",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("description", sa.String(length=1024), nullable=False),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("species", sa.String(length=32), nullable=False),
        sa.Column("stock", sa.Integer()),
        sa.Column(
            "store_id",
            sa.Integer(),
            sa.ForeignKey(
                "stores.id", ondelete="SET NULL", name="fk_products_store_id_stores"
            ),
        ),
        sa.Column(
            "staff_id",
            sa.String(length=64),
            sa.ForeignKey(
                "staff.staff_id",
                ondelete="SET NULL",
                name="fk_products_staff_id_staff",
            ),
        ),
        sa.Column("image", sa.String(length=255), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_products"),
    )
    op.create_index("ix_products_species", "products", ["species"])

    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "owner_cpf",
            sa.String(length=14),
            sa.ForeignKey(
                "accounts.cpf",
                ondelete="CASCADE",
                name="fk_pets_owner_cpf_accounts",
            ),
            nullable=False,
        ),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("species", sa.String(length=60), nullable=False),
        sa.Column("breed", sa.String(length=120)),
        sa.Column("age", sa.String(length=20)),
        sa.Column("consultation_at", sa.DateTime(timezone=True)),
        sa.Column("boarding_at", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_pets"),
    )
    op.create_index("ix_pets_owner_cpf", "pets", ["owner_cpf"])

    op.create_table(
        "services",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=120), nullable=False),
        sa.Column("description", sa.String(length=1024)),
        sa.Column("price", sa.Numeric(10, 2), nullable=False),
        sa.Column("duration", sa.String(length=60)),
        sa.Column("category", sa.String(length=32), nullable=False),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column(
            "staff_id",
            sa.String(length=64),
            sa.ForeignKey(
                "staff.staff_id",
                ondelete="SET NULL",
                name="fk_services_staff_id_staff",
            ),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_services"),
    )

    op.create_table(
        "appointments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("scheduled_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("notes", sa.String(length=1024)),
        sa.Column(
            "pet_id",
            sa.Integer(),
            sa.ForeignKey(
                "pets.id", ondelete="CASCADE", name="fk_appointments_pet_id_pets"
            ),
            nullable=False,
        ),
        sa.Column(
            "service_id",
            sa.Integer(),
            sa.ForeignKey(
                "services.id",
                ondelete="CASCADE",
                name="fk_appointments_service_id_services",
            ),
            nullable=False,
        ),
        sa.Column(
            "account_cpf",
            sa.String(length=14),
            sa.ForeignKey(
                "accounts.cpf",
                ondelete="CASCADE",
                name="fk_appointments_account_cpf_accounts",
            ),
            nullable=False,
        ),
        sa.Column("status", sa.String(length=32), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_appointments"),
    )
    op.create_index(
        "ix_appointments_scheduled_at", "appointments", ["scheduled_at"]
    )
    op.create_index(
        "ux_appointments_active_slot",
        "appointments",
        ["service_id", "scheduled_at"],
        unique=True,
        sqlite_where=sa.text(ACTIVE_SLOT_PREDICATE),
        postgresql_where=sa.text(ACTIVE_SLOT_PREDICATE),
    )


def downgrade() -> None:
    op.drop_index("ux_appointments_active_slot", table_name="appointments")
    op.drop_index("ix_appointments_scheduled_at", table_name="appointments")
    op.drop_table("appointments")
    op.drop_table("services")
    op.drop_index("ix_pets_owner_cpf", table_name="pets")
    op.drop_table("pets")
    op.drop_index("ix_products_species", table_name="products")
    op.drop_table("products")
    op.drop_table("stores")
    op.drop_table("staff")
    op.drop_table("accounts")
    op.drop_table("addresses")

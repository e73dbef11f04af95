"""Initial schema for the share registry."""
from __future__ import annotations

from collections.abc import Iterable

import sqlalchemy as sa
from alembic import op

revision = "20250301_01"
down_revision = None
branch_labels = None
depends_on: Iterable[str] | None = None


def _drop_enum(name: str) -> None:
    bind = op.get_bind()
    if bind.dialect.name == "postgresql":
        op.execute(sa.text(f"DROP TYPE IF EXISTS {name}"))


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:  # noqa: D401
    """Create registry tables and indexes."""

    client_profile_status = sa.Enum("Active", "Closed", "Pending", "Suspended", name="client_profile_status")
    renewal_status = sa.Enum("Active", "Expiring", "Expired", "Pending", name="renewal_status")
    shareholder_type = sa.Enum("Shareholder", "Stockholder", name="shareholder_type")
    transfer_person_type = sa.Enum("Shareholder", "Stockholder", name="transfer_person_type")
    transfer_status = sa.Enum("Initiated", "In-Process", "Completed", name="transfer_status")

    op.create_table(
        "client_profiles",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("shareholder_name", sa.JSON(), nullable=False),
        sa.Column("primary_name", sa.String(length=255), nullable=False),
        sa.Column("pan_number", sa.String(length=32), nullable=False),
        sa.Column("aadhaar_number", sa.String(length=32)),
        sa.Column("address", sa.Text()),
        sa.Column("bank_details", sa.JSON()),
        sa.Column("demat_account_number", sa.String(length=64)),
        sa.Column("demat_created_with", sa.String(length=255)),
        sa.Column("demat_created_with_person", sa.String(length=255)),
        sa.Column("share_holdings", sa.JSON(), nullable=False),
        sa.Column("company_names", sa.Text(), nullable=False, server_default=""),
        sa.Column("profile_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("status", client_profile_status, nullable=False, server_default="Active"),
        sa.Column("remarks", sa.Text()),
        sa.Column("dividend", sa.JSON()),
        *_timestamps(),
    )
    op.create_index("ix_client_profiles_pan_number", "client_profiles", ["pan_number"])
    op.create_index("ix_client_profiles_status", "client_profiles", ["status"])
    op.create_index("ix_client_profiles_created_at", "client_profiles", ["created_at"])

    op.create_table(
        "dmat_accounts",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("account_number", sa.String(length=64), nullable=False),
        sa.Column("holder_name", sa.String(length=255), nullable=False),
        sa.Column("expiry_date", sa.Date(), nullable=False),
        sa.Column("renewal_status", renewal_status, nullable=False, server_default="Active"),
        *_timestamps(),
    )
    op.create_index("ix_dmat_accounts_account_number", "dmat_accounts", ["account_number"])

    op.create_table(
        "shareholders",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("email", sa.String(length=320), nullable=False),
        sa.Column("phone", sa.String(length=32), nullable=False),
        sa.Column("pan", sa.String(length=32), nullable=False),
        sa.Column("type", shareholder_type, nullable=False),
        sa.Column("linked_dmat_account_id", sa.String(length=36)),
        *_timestamps(),
        sa.ForeignKeyConstraint(["linked_dmat_account_id"], ["dmat_accounts.id"], ondelete="SET NULL"),
    )
    op.create_index("ix_shareholders_email", "shareholders", ["email"])
    op.create_index("ix_shareholders_pan", "shareholders", ["pan"])
    op.create_index("ix_shareholders_type", "shareholders", ["type"])

    op.create_table(
        "transfers",
        sa.Column("id", sa.String(length=36), primary_key=True),
        sa.Column("person_id", sa.String(length=36), nullable=False),
        sa.Column("person_type", transfer_person_type, nullable=False),
        sa.Column("person_name", sa.String(length=255), nullable=False),
        sa.Column("company", sa.String(length=255), nullable=False),
        sa.Column("transfer_date", sa.Date(), nullable=False),
        sa.Column("status", transfer_status, nullable=False, server_default="Initiated"),
        sa.Column("expected_credit_date", sa.Date()),
        sa.Column("moved_to_ipf", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("dividends_received", sa.Numeric(18, 2)),
        sa.Column("pending_dividends", sa.Numeric(18, 2)),
        sa.Column("bonus_shares", sa.Integer()),
        *_timestamps(),
    )
    op.create_index("ix_transfers_person_id", "transfers", ["person_id"])
    op.create_index("ix_transfers_status", "transfers", ["status"])


def downgrade() -> None:  # noqa: D401
    """Drop all registry tables."""

    op.drop_index("ix_transfers_status", table_name="transfers")
    op.drop_index("ix_transfers_person_id", table_name="transfers")
    op.drop_table("transfers")

    op.drop_index("ix_shareholders_type", table_name="shareholders")
    op.drop_index("ix_shareholders_pan", table_name="shareholders")
    op.drop_index("ix_shareholders_email", table_name="shareholders")
    op.drop_table("shareholders")

    op.drop_index("ix_dmat_accounts_account_number", table_name="dmat_accounts")
    op.drop_table("dmat_accounts")

    op.drop_index("ix_client_profiles_created_at", table_name="client_profiles")
    op.drop_index("ix_client_profiles_status", table_name="client_profiles")
    op.drop_index("ix_client_profiles_pan_number", table_name="client_profiles")
    op.drop_table("client_profiles")

    for enum_name in [
        "transfer_status",
        "transfer_person_type",
        "shareholder_type",
        "renewal_status",
        "client_profile_status",
    ]:
        _drop_enum(enum_name)

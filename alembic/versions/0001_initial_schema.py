"""Initial schema: users, employees, tournaments and login sessions.

Revision ID: 0001
Revises:
Create Date: 2026-10-17
"""

from __future__ import annotations

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _identity_columns() -> list[sa.Column]:
    return [
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column(
            "external_id",
            postgresql.UUID(as_uuid=True),
            nullable=False,
            server_default=sa.text("gen_random_uuid()"),
        ),
    ]


def _soft_delete_audit_columns() -> list[sa.Column]:
    return [
        sa.Column("is_active", sa.Boolean, nullable=False, server_default=sa.text("true")),
        sa.Column("is_deleted", sa.Boolean, nullable=False, server_default=sa.text("false")),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_by", sa.Text, nullable=True),
        sa.Column("updated_by", sa.Text, nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # ------------------------------------------------------------------ #
    # 1. ACCOUNTS                                                         #
    # ------------------------------------------------------------------ #

    op.create_table(
        "users",
        *_identity_columns(),
        sa.Column("first_name", sa.Text, nullable=True),
        sa.Column("last_name", sa.Text, nullable=True),
        sa.Column("email", sa.Text, nullable=True),
        sa.Column("whatsapp_number", sa.Text, nullable=True),
        sa.Column("password", sa.Text, nullable=True),
        sa.Column("reset_password_token", sa.Text, nullable=True),
        sa.Column("last_login_ip", sa.Text, nullable=True),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("upi_id", sa.Text, nullable=True),
        sa.Column("profile_picture", sa.Text, nullable=True),
        sa.Column("avatar", sa.Text, nullable=True),
        sa.Column("country_code", sa.Text, nullable=True),
        sa.Column("role", sa.Text, nullable=True),
        sa.Column("status", sa.Text, nullable=False, server_default="ACTIVE"),
        sa.Column("is_verified", sa.Boolean, nullable=True),
        *_soft_delete_audit_columns(),
        sa.UniqueConstraint("external_id", name="uq_users_external_id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
        sa.UniqueConstraint("whatsapp_number", name="uq_users_whatsapp_number"),
        sa.UniqueConstraint("upi_id", name="uq_users_upi_id"),
    )

    op.create_table(
        "employees",
        *_identity_columns(),
        sa.Column("first_name", sa.Text, nullable=True),
        sa.Column("last_name", sa.Text, nullable=True),
        sa.Column("email", sa.Text, nullable=True),
        sa.Column("whatsapp_number", sa.Text, nullable=True),
        sa.Column("password", sa.Text, nullable=True),
        sa.Column("profile_picture", sa.Text, nullable=True),
        sa.Column("role", sa.Text, nullable=False, server_default="STAFF"),
        sa.Column("status", sa.Text, nullable=False, server_default="ACTIVE"),
        sa.Column("last_login_ip", sa.Text, nullable=True),
        sa.Column("last_login_at", sa.DateTime(timezone=True), nullable=True),
        *_soft_delete_audit_columns(),
        sa.UniqueConstraint("external_id", name="uq_employees_external_id"),
        sa.UniqueConstraint("email", name="uq_employees_email"),
        sa.UniqueConstraint("whatsapp_number", name="uq_employees_whatsapp_number"),
    )

    # ------------------------------------------------------------------ #
    # 2. TOURNAMENTS                                                      #
    # ------------------------------------------------------------------ #

    op.create_table(
        "tournaments",
        *_identity_columns(),
        sa.Column("title", sa.Text, nullable=True),
        sa.Column("tagline", sa.Text, nullable=True),
        sa.Column("description", sa.Text, nullable=True),
        sa.Column("type", sa.Text, nullable=True),
        sa.Column("entry_fee", sa.Text, nullable=True),
        sa.Column("prizepool", sa.Text, nullable=True),
        sa.Column("first_prize", sa.Text, nullable=True),
        sa.Column("second_prize", sa.Text, nullable=True),
        sa.Column("third_prize", sa.Text, nullable=True),
        sa.Column("max_participants", sa.Integer, nullable=True),
        sa.Column("min_participants", sa.Integer, nullable=True),
        sa.Column("max_teams", sa.Integer, nullable=True),
        sa.Column("min_teams", sa.Integer, nullable=True),
        sa.Column("tournament_start_date", sa.Text, nullable=True),
        sa.Column("tournament_end_date", sa.Text, nullable=True),
        sa.Column("registration_start_date", sa.Text, nullable=True),
        sa.Column("registration_end_date", sa.Text, nullable=True),
        sa.Column("rules", postgresql.JSONB, nullable=True),
        sa.Column("status", sa.Text, nullable=False, server_default="UPCOMING"),
        *_soft_delete_audit_columns(),
        sa.UniqueConstraint("external_id", name="uq_tournaments_external_id"),
        sa.UniqueConstraint("title", name="uq_tournaments_title"),
    )

    # ------------------------------------------------------------------ #
    # 3. LOGIN SESSIONS                                                   #
    # ------------------------------------------------------------------ #

    for table, owner_column in (("sessions", "user_id"), ("employee_sessions", "employee_id")):
        op.create_table(
            table,
            *_identity_columns(),
            sa.Column(owner_column, sa.Text, nullable=True),
            sa.Column("token", sa.Text, nullable=True),
            sa.Column("device_id", sa.Text, nullable=True),
            sa.Column("ip_address", sa.Text, nullable=True),
            sa.Column("device_type", sa.Text, nullable=True),
            sa.Column("expires_at", sa.DateTime(timezone=True), nullable=True),
            sa.UniqueConstraint("external_id", name=f"uq_{table}_external_id"),
        )
        op.create_index(f"ix_{table}_token", table, ["token"])


def downgrade() -> None:
    op.drop_index("ix_employee_sessions_token", table_name="employee_sessions")
    op.drop_index("ix_sessions_token", table_name="sessions")

    op.drop_table("employee_sessions")
    op.drop_table("sessions")
    op.drop_table("tournaments")
    op.drop_table("employees")
    op.drop_table("users")

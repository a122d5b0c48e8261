"""Initial schema for the hotel voice assistant

Revision ID: 20261019_000000
Revises: None
Create Date: 2026-10-19 00:00:00.000000

Creates every table the backend uses:
- users (staff accounts)
- transcripts, call_summaries (call records)
- orders, staff_requests, staff_messages (order intake and dashboard)
- reference_items (reference material)

The staff account is not seeded here; the server seeds it at startup from
AUTH__STAFF_USERNAME / AUTH__STAFF_PASSWORD so no credential lives in the
migration history.

Revision format: YYYYMMDD_HHMMSS_description

"""

from typing import Sequence, Union

import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import JSONB

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "20261019_000000"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create all tables."""

    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("username", sa.String(128), nullable=False),
        sa.Column("password_hash", sa.String(256), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_users_username", "username", unique=True),
    )

    op.create_table(
        "transcripts",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("call_id", sa.String(128), nullable=False),
        sa.Column("role", sa.String(16), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_transcripts_call_id", "call_id"),
        sa.Index("ix_transcripts_timestamp", "timestamp"),
    )

    op.create_table(
        "orders",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("call_id", sa.String(128), nullable=False),
        sa.Column("room_number", sa.String(32), nullable=False),
        sa.Column("order_type", sa.String(256), nullable=False),
        sa.Column("delivery_time", sa.String(32), nullable=False),
        sa.Column("special_instructions", sa.Text(), nullable=True),
        sa.Column("items", JSONB(), nullable=False, server_default="[]"),
        sa.Column("total_amount", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("status", sa.String(32), nullable=False, server_default="pending"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_orders_call_id", "call_id"),
        sa.Index("ix_orders_room_number", "room_number"),
        sa.Index("ix_orders_status", "status"),
        sa.Index("ix_orders_created_at", "created_at"),
    )

    op.create_table(
        "call_summaries",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("call_id", sa.String(128), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.Column("room_number", sa.String(32), nullable=True),
        sa.Column("duration", sa.String(16), nullable=True),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_call_summaries_call_id", "call_id"),
        sa.Index("ix_call_summaries_timestamp", "timestamp"),
    )

    op.create_table(
        "staff_requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("call_id", sa.String(128), nullable=False),
        sa.Column("room_number", sa.String(32), nullable=False),
        sa.Column("guest_name", sa.String(256), nullable=True),
        sa.Column("order_id", sa.String(64), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("status", sa.String(32), nullable=False, server_default="New"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_staff_requests_call_id", "call_id"),
        sa.Index("ix_staff_requests_room_number", "room_number"),
        sa.Index("ix_staff_requests_status", "status"),
        sa.Index("ix_staff_requests_created_at", "created_at"),
    )

    op.create_table(
        "staff_messages",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("request_id", sa.Integer(), nullable=False),
        sa.Column("sender", sa.String(16), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("timestamp", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["request_id"], ["staff_requests.id"], ondelete="CASCADE"),
        sa.Index("ix_staff_messages_request_id", "request_id"),
        sa.Index("ix_staff_messages_timestamp", "timestamp"),
    )

    op.create_table(
        "reference_items",
        sa.Column("id", sa.String(128), nullable=False),
        sa.Column("type", sa.String(16), nullable=False),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("keywords", JSONB(), nullable=False, server_default="[]"),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.Index("ix_reference_items_created_at", "created_at"),
    )


def downgrade() -> None:
    """Drop all tables."""
    op.drop_table("reference_items")
    op.drop_table("staff_messages")
    op.drop_table("staff_requests")
    op.drop_table("call_summaries")
    op.drop_table("orders")
    op.drop_table("transcripts")
    op.drop_table("users")

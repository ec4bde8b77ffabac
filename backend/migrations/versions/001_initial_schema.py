"""Initial schema: accounts, organizations, review queues and published content.

Revision ID: 001
Revises:
Create Date: 2026-10-17
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

UUID = postgresql.UUID(as_uuid=True)
JSONB_LIST = postgresql.JSONB


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def _review_columns() -> list[sa.Column]:
    return [
        sa.Column("organization_id", UUID, sa.ForeignKey("organizations.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("status", sa.String(20), nullable=False, server_default="pending", index=True),
        sa.Column("admin_reason", sa.Text),
        sa.Column("reviewed_at", sa.DateTime(timezone=True)),
        sa.Column("reviewed_by", UUID, sa.ForeignKey("users.id", ondelete="SET NULL")),
    ]


def _audience_columns() -> list[sa.Column]:
    return [
        sa.Column("target_audience", sa.String(30), nullable=False, server_default="children"),
        sa.Column("age_group", sa.String(10)),
    ]


def _json_list(name: str) -> sa.Column:
    return sa.Column(name, JSONB_LIST, nullable=False, server_default=sa.text("'[]'::jsonb"))


def _resource_columns() -> list[sa.Column]:
    return [
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("short_description", sa.Text, nullable=False),
        sa.Column("picture", sa.String(500)),
        sa.Column("picture_public_id", sa.String(255)),
        _json_list("documents"),
        _json_list("tags"),
        *_audience_columns(),
    ]


def _media_columns() -> list[sa.Column]:
    return [
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("content_type", sa.String(20), nullable=False, server_default="pictures"),
        sa.Column("text_content", sa.Text),
        _json_list("files"),
        _json_list("tags"),
        *_audience_columns(),
    ]


def _event_columns() -> list[sa.Column]:
    return [
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("location", sa.String(500), nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_date", sa.DateTime(timezone=True)),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("registration_link", sa.String(500)),
        sa.Column("cover_image", sa.String(500)),
        sa.Column("cover_image_public_id", sa.String(255)),
        _json_list("tags"),
        *_audience_columns(),
    ]


def _super_hero_columns() -> list[sa.Column]:
    return [
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("icon", sa.String(500), nullable=False),
        sa.Column("icon_type", sa.String(10), nullable=False, server_default="emoji"),
        sa.Column("icon_public_id", sa.String(255)),
        sa.Column("phone", sa.String(20), nullable=False),
        sa.Column("short_description", sa.Text, nullable=False),
    ]


# (request table, published table, payload columns)
CONTENT_TABLES = [
    ("resource_requests", "resources", _resource_columns),
    ("media_requests", "media", _media_columns),
    ("event_requests", "events", _event_columns),
    ("super_hero_requests", "super_heroes", _super_hero_columns),
]


def upgrade() -> None:
    # Users
    op.create_table(
        "users",
        sa.Column("id", UUID, primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False, index=True),
        sa.Column("is_active", sa.Boolean, server_default=sa.text("true"), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True)),
        sa.Column("avatar", sa.String(500)),
        sa.Column("phone", sa.String(20)),
        sa.Column("address", sa.String(500)),
        sa.Column("otp", sa.String(6)),
        sa.Column("otp_expires_at", sa.DateTime(timezone=True)),
        *_timestamps(),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # Organizations (one per organizer)
    op.create_table(
        "organizations",
        sa.Column("id", UUID, primary_key=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("short_description", sa.Text, nullable=False),
        sa.Column("logo", sa.String(500)),
        sa.Column("website", sa.String(500)),
        sa.Column("contact_email", sa.String(255), nullable=False),
        sa.Column("contact_phone", sa.String(20), nullable=False),
        sa.Column("address", sa.String(500), nullable=False),
        sa.Column("user_id", UUID, sa.ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False),
        *_timestamps(),
    )

    # Review queues and their published copies
    for request_table, published_table, payload in CONTENT_TABLES:
        op.create_table(
            request_table,
            sa.Column("id", UUID, primary_key=True),
            *_review_columns(),
            *payload(),
            *_timestamps(),
        )
        op.create_index(f"idx_{request_table}_org_status", request_table, ["organization_id", "status"])

        # Admin-added super heroes have no request and may have no organization
        org_nullable = published_table == "super_heroes"
        op.create_table(
            published_table,
            sa.Column("id", UUID, primary_key=True),
            sa.Column("request_id", UUID, sa.ForeignKey(f"{request_table}.id"), unique=True),
            sa.Column(
                "organization_id",
                UUID,
                sa.ForeignKey("organizations.id", ondelete="SET NULL" if org_nullable else "CASCADE"),
                nullable=org_nullable,
                index=True,
            ),
            *payload(),
            *_timestamps(),
        )
    op.create_index("ix_events_start_date", "events", ["start_date"])

    # Tag registry
    op.create_table(
        "tags",
        sa.Column("id", UUID, primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        *_timestamps(),
    )
    op.create_index("ix_tags_name", "tags", ["name"], unique=True)

    # Download counters
    op.create_table(
        "document_download_counts",
        sa.Column("id", UUID, primary_key=True),
        sa.Column("resource_id", UUID, sa.ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True),
        sa.Column("document_public_id", sa.String(255), nullable=False),
        sa.Column("count", sa.Integer, nullable=False, server_default=sa.text("0")),
        *_timestamps(),
        sa.UniqueConstraint("resource_id", "document_public_id", name="uq_download_counts_resource_document"),
    )

    # Site content
    op.create_table(
        "announcements",
        sa.Column("id", UUID, primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("is_live", sa.Boolean, nullable=False, server_default=sa.text("false"), index=True),
        *_timestamps(),
    )
    op.create_table(
        "organizer_applications",
        sa.Column("id", UUID, primary_key=True),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("phone", sa.String(20)),
        sa.Column("message", sa.Text),
        *_timestamps(),
    )


def downgrade() -> None:
    op.drop_table("organizer_applications")
    op.drop_table("announcements")
    op.drop_table("document_download_counts")
    op.drop_table("tags")
    for request_table, published_table, _ in reversed(CONTENT_TABLES):
        op.drop_table(published_table)
        op.drop_table(request_table)
    op.drop_table("organizations")
    op.drop_table("users")

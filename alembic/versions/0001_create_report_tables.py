"""Create person, community, post and post_report tables.

Revision ID: 0001_create_report_tables
Revises:
Create Date: 2026-10-19

"""

from __future__ import annotations

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "0001_create_report_tables"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "person",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("display_name", sa.String(length=255), nullable=True),
        sa.Column("banned", sa.Boolean(), nullable=False),
        sa.Column("deleted", sa.Boolean(), nullable=False),
        sa.Column("local", sa.Boolean(), nullable=False),
        sa.Column("published", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_person_id", "person", ["id"])

    op.create_table(
        "local_user",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("person_id", sa.Integer(), nullable=False),
        sa.Column("admin", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["person_id"], ["person.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("person_id"),
    )
    op.create_index("ix_local_user_id", "local_user", ["id"])

    op.create_table(
        "person_actions",
        sa.Column("person_id", sa.Integer(), nullable=False),
        sa.Column("target_id", sa.Integer(), nullable=False),
        sa.Column("followed", sa.TIMESTAMP(), nullable=True),
        sa.Column("blocked", sa.TIMESTAMP(), nullable=True),
        sa.ForeignKeyConstraint(["person_id"], ["person.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["target_id"], ["person.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("person_id", "target_id"),
    )

    op.create_table(
        "community",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("title", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("removed", sa.Boolean(), nullable=False),
        sa.Column("deleted", sa.Boolean(), nullable=False),
        sa.Column("hidden", sa.Boolean(), nullable=False),
        sa.Column("published", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("name"),
    )
    op.create_index("ix_community_id", "community", ["id"])

    op.create_table(
        "community_actions",
        sa.Column("person_id", sa.Integer(), nullable=False),
        sa.Column("community_id", sa.Integer(), nullable=False),
        sa.Column("followed", sa.TIMESTAMP(), nullable=True),
        sa.Column("follow_pending", sa.Boolean(), nullable=True),
        sa.Column("became_moderator", sa.TIMESTAMP(), nullable=True),
        sa.Column("received_ban", sa.TIMESTAMP(), nullable=True),
        sa.Column("ban_expires", sa.TIMESTAMP(), nullable=True),
        sa.ForeignKeyConstraint(["person_id"], ["person.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["community_id"], ["community.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("person_id", "community_id"),
    )
    op.create_index("ix_community_actions_community_id", "community_actions", ["community_id"])

    op.create_table(
        "post",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(length=200), nullable=False),
        sa.Column("url", sa.String(length=2000), nullable=True),
        sa.Column("body", sa.Text(), nullable=True),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("community_id", sa.Integer(), nullable=False),
        sa.Column("removed", sa.Boolean(), nullable=False),
        sa.Column("locked", sa.Boolean(), nullable=False),
        sa.Column("deleted", sa.Boolean(), nullable=False),
        sa.Column("nsfw", sa.Boolean(), nullable=False),
        sa.Column("published", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated", sa.TIMESTAMP(), nullable=True),
        sa.ForeignKeyConstraint(["creator_id"], ["person.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["community_id"], ["community.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_post_id", "post", ["id"])
    op.create_index("ix_post_creator_id", "post", ["creator_id"])
    op.create_index("ix_post_community_id", "post", ["community_id"])

    op.create_table(
        "post_aggregates",
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("comments", sa.Integer(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("upvotes", sa.Integer(), nullable=False),
        sa.Column("downvotes", sa.Integer(), nullable=False),
        sa.Column("published", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
        sa.Column("newest_comment_time", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("post_id"),
    )

    op.create_table(
        "post_actions",
        sa.Column("person_id", sa.Integer(), nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("read", sa.TIMESTAMP(), nullable=True),
        sa.Column("read_comments", sa.TIMESTAMP(), nullable=True),
        sa.Column("read_comments_amount", sa.Integer(), nullable=True),
        sa.Column("saved", sa.TIMESTAMP(), nullable=True),
        sa.Column("liked", sa.TIMESTAMP(), nullable=True),
        sa.Column("like_score", sa.SmallInteger(), nullable=True),
        sa.Column("hidden", sa.TIMESTAMP(), nullable=True),
        sa.ForeignKeyConstraint(["person_id"], ["person.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("person_id", "post_id"),
    )
    op.create_index("ix_post_actions_post_id", "post_actions", ["post_id"])

    op.create_table(
        "post_report",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("creator_id", sa.Integer(), nullable=False),
        sa.Column("post_id", sa.Integer(), nullable=False),
        sa.Column("original_post_name", sa.String(length=200), nullable=False),
        sa.Column("original_post_url", sa.Text(), nullable=True),
        sa.Column("original_post_body", sa.Text(), nullable=True),
        sa.Column("reason", sa.Text(), nullable=False),
        sa.Column("resolved", sa.Boolean(), nullable=False),
        sa.Column("resolver_id", sa.Integer(), nullable=True),
        sa.Column("published", sa.TIMESTAMP(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated", sa.TIMESTAMP(), nullable=True),
        sa.ForeignKeyConstraint(["creator_id"], ["person.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["post_id"], ["post.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["resolver_id"], ["person.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("post_id", "creator_id", name="uq_post_report_post_creator"),
    )
    op.create_index("ix_post_report_id", "post_report", ["id"])
    op.create_index("ix_post_report_creator_id", "post_report", ["creator_id"])
    op.create_index("ix_post_report_post_id", "post_report", ["post_id"])
    op.create_index("ix_post_report_resolved", "post_report", ["resolved"])
    op.create_index("ix_post_report_published", "post_report", ["published"])


def downgrade() -> None:
    op.drop_index("ix_post_report_published", table_name="post_report")
    op.drop_index("ix_post_report_resolved", table_name="post_report")
    op.drop_index("ix_post_report_post_id", table_name="post_report")
    op.drop_index("ix_post_report_creator_id", table_name="post_report")
    op.drop_index("ix_post_report_id", table_name="post_report")
    op.drop_table("post_report")
    op.drop_index("ix_post_actions_post_id", table_name="post_actions")
    op.drop_table("post_actions")
    op.drop_table("post_aggregates")
    op.drop_index("ix_post_community_id", table_name="post")
    op.drop_index("ix_post_creator_id", table_name="post")
    op.drop_index("ix_post_id", table_name="post")
    op.drop_table("post")
    op.drop_index("ix_community_actions_community_id", table_name="community_actions")
    op.drop_table("community_actions")
    op.drop_index("ix_community_id", table_name="community")
    op.drop_table("community")
    op.drop_table("person_actions")
    op.drop_index("ix_local_user_id", table_name="local_user")
    op.drop_table("local_user")
    op.drop_index("ix_person_id", table_name="person")
    op.drop_table("person")

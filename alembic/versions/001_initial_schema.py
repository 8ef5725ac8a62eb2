"""Initial schema.

Revision ID: 001
Revises:
Create Date: 2025-01-01 00:00:00.000000
"""

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision = "001"
down_revision = None
branch_labels = None
depends_on = None

ONE_ACTOR = "(user_id IS NULL) <> (session_id IS NULL)"


def _actor_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "user_id",
            sa.Integer,
            sa.ForeignKey("user_profiles.id", ondelete="CASCADE"),
            nullable=True,
        ),
        sa.Column("session_id", sa.String(100), nullable=True),
        sa.Column(
            "media_item_id",
            sa.Integer,
            sa.ForeignKey("media_items.id", ondelete="CASCADE"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    media_type = postgresql.ENUM("movie", "tv", name="media_type")
    interaction_type = postgresql.ENUM(
        "like",
        "dislike",
        "watched_liked",
        "watched_disliked",
        "add_to_watchlist",
        "remove_from_watchlist",
        name="interaction_type",
    )

    # User profiles
    op.create_table(
        "user_profiles",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("username", sa.String(50), unique=True, nullable=False),
        sa.Column("email", sa.String(255), unique=True, nullable=False, index=True),
        sa.Column("created_at", sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.func.now(), nullable=False),
    )

    # Media items (movies and TV shows from TMDB)
    op.create_table(
        "media_items",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("tmdb_id", sa.Integer, nullable=False),
        sa.Column("title", sa.String(500), nullable=False, index=True),
        sa.Column("media_type", media_type, nullable=False),
        sa.Column("poster_path", sa.String(500), nullable=True),
        sa.Column("backdrop_path", sa.String(500), nullable=True),
        sa.Column("overview", sa.Text, nullable=False, server_default=""),
        sa.Column("release_date", sa.String(20), nullable=True),
        sa.Column("genres", postgresql.ARRAY(sa.String), nullable=False, server_default="{}"),
        sa.Column("vote_average", sa.Numeric(3, 1), nullable=False),
        sa.Column("vote_count", sa.Integer, nullable=False, server_default="0"),
        sa.Column("popularity", sa.Numeric(10, 3), nullable=False),
        sa.Column("adult", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("original_language", sa.String(10), nullable=False),
        sa.Column("created_at", sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.func.now(), nullable=False),
    )
    op.create_index("ix_media_items_tmdb_id", "media_items", ["tmdb_id"])
    op.create_unique_constraint(
        "uq_media_items_tmdb_kind", "media_items", ["tmdb_id", "media_type"]
    )
    op.create_index("ix_media_items_rating_popularity", "media_items", ["vote_average", "popularity"])
    op.create_index("ix_media_items_popularity", "media_items", ["popularity"])

    # Interactions: one current row per (actor, media item)
    op.create_table(
        "user_interactions",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        *_actor_columns(),
        sa.Column("interaction_type", interaction_type, nullable=False),
        sa.Column("created_at", sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("user_id", "media_item_id", name="uq_interactions_user_media"),
        sa.UniqueConstraint("session_id", "media_item_id", name="uq_interactions_session_media"),
        sa.CheckConstraint(ONE_ACTOR, name="ck_interactions_one_actor"),
    )

    # Recommendations
    op.create_table(
        "recommendations",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        *_actor_columns(),
        sa.Column("reason", sa.Text, nullable=False),
        sa.Column("score", sa.Numeric(5, 4), nullable=False),
        sa.Column("shown", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.CheckConstraint(ONE_ACTOR, name="ck_recommendations_one_actor"),
    )
    op.create_index(
        "ix_recommendations_user_queue", "recommendations", ["user_id", "shown", "score"]
    )
    op.create_index(
        "ix_recommendations_session_queue", "recommendations", ["session_id", "shown", "score"]
    )

    # Watchlist
    op.create_table(
        "watchlist",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        *_actor_columns(),
        sa.Column("created_at", sa.DateTime, server_default=sa.func.now(), nullable=False),
        sa.UniqueConstraint("user_id", "media_item_id", name="uq_watchlist_user_media"),
        sa.UniqueConstraint("session_id", "media_item_id", name="uq_watchlist_session_media"),
        sa.CheckConstraint(ONE_ACTOR, name="ck_watchlist_one_actor"),
    )


def downgrade() -> None:
    op.drop_table("watchlist")
    op.drop_index("ix_recommendations_session_queue", table_name="recommendations")
    op.drop_index("ix_recommendations_user_queue", table_name="recommendations")
    op.drop_table("recommendations")
    op.drop_table("user_interactions")
    op.execute("DROP TYPE IF EXISTS interaction_type")
    op.drop_constraint("uq_media_items_tmdb_kind", "media_items", type_="unique")
    op.drop_index("ix_media_items_popularity", table_name="media_items")
    op.drop_index("ix_media_items_rating_popularity", table_name="media_items")
    op.drop_index("ix_media_items_tmdb_id", table_name="media_items")
    op.drop_table("media_items")
    op.execute("DROP TYPE IF EXISTS media_type")
    op.drop_table("user_profiles")

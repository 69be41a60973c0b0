"""initial_schema

Create the gallery schema:
- Profiles (voting identity, optionally linked to an auth user)
- Images
- Captions (belong to an image, carry a like counter)
- Caption votes (one row per profile and caption, +1 or -1)

Row-level security policies for caption votes are created when the database
provides an ``auth.uid()`` function (managed backends do).

Revision ID: 3c1f0b7d92a4
Revises:
Create Date: 2026-02-14 10:12:47.531904

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f0b7d92a4"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # gen_random_uuid()
    op.execute('CREATE EXTENSION IF NOT EXISTS "pgcrypto"')

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=True),
        sa.Column(
            "created_datetime_utc",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", name="uq_profiles_user_id"),
    )

    # ========================================================================
    # IMAGES table
    # ========================================================================
    op.create_table(
        "images",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("url", sa.Text(), nullable=True),
        sa.Column("image_description", sa.Text(), nullable=True),
        sa.Column("additional_context", sa.Text(), nullable=True),
        sa.Column("celebrity_recognition", sa.Text(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=True, server_default="false"),
        sa.Column("is_common_use", sa.Boolean(), nullable=True, server_default="false"),
        sa.Column(
            "created_datetime_utc",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("modified_datetime_utc", sa.TIMESTAMP(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_images_public_created", "images", ["is_public", "created_datetime_utc"]
    )

    # ========================================================================
    # CAPTIONS table
    # ========================================================================
    op.create_table(
        "captions",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("content", sa.Text(), nullable=True),
        sa.Column("image_id", sa.UUID(), nullable=True),
        sa.Column("profile_id", sa.UUID(), nullable=True),
        sa.Column("is_public", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "created_datetime_utc",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["image_id"], ["images.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_captions_image_id", "captions", ["image_id"])

    # ========================================================================
    # CAPTION_VOTES table
    # ========================================================================
    op.create_table(
        "caption_votes",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("gen_random_uuid()"),
            nullable=False,
        ),
        sa.Column("profile_id", sa.UUID(), nullable=False),
        sa.Column("caption_id", sa.UUID(), nullable=False),
        sa.Column("vote_value", sa.SmallInteger(), nullable=False),
        sa.Column(
            "created_datetime_utc",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "modified_datetime_utc",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["profile_id"], ["profiles.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["caption_id"], ["captions.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "profile_id", "caption_id", name="uq_caption_votes_profile_caption"
        ),
        sa.CheckConstraint(
            "vote_value IN (1, -1)", name="ck_caption_votes_vote_value"
        ),
    )
    op.create_index("idx_caption_votes_caption_id", "caption_votes", ["caption_id"])

    # ========================================================================
    # Row-level security for caption votes
    # ========================================================================
    op.execute("""
        DO $$ BEGIN
            IF EXISTS (
                SELECT 1 FROM pg_proc p
                JOIN pg_namespace n ON n.oid = p.pronamespace
                WHERE n.nspname = 'auth' AND p.proname = 'uid'
            ) THEN
                ALTER TABLE caption_votes ENABLE ROW LEVEL SECURITY;

                CREATE POLICY caption_votes_select_own ON caption_votes
                    FOR SELECT USING (
                        profile_id = auth.uid()
                        OR profile_id IN (SELECT id FROM profiles WHERE user_id = auth.uid())
                    );

                CREATE POLICY caption_votes_insert_own ON caption_votes
                    FOR INSERT WITH CHECK (
                        profile_id = auth.uid()
                        OR profile_id IN (SELECT id FROM profiles WHERE user_id = auth.uid())
                    );

                CREATE POLICY caption_votes_update_own ON caption_votes
                    FOR UPDATE USING (
                        profile_id = auth.uid()
                        OR profile_id IN (SELECT id FROM profiles WHERE user_id = auth.uid())
                    );
            END IF;
        END $$;
    """)


def downgrade() -> None:
    """Downgrade schema."""
    # Policies are dropped with the table
    op.drop_table("caption_votes")
    op.drop_table("captions")
    op.drop_table("images")
    op.drop_table("profiles")

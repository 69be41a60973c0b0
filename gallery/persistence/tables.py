"""SQLAlchemy table definitions for the gallery.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),  # Usually equal to the auth user id
    Column("user_id", UUID, nullable=True, unique=True),  # Optional link to auth user
    Column(
        "created_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

# ============================================================================
# IMAGES TABLE
# ============================================================================
images_table = Table(
    "images",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("url", Text, nullable=True),
    Column("image_description", Text, nullable=True),
    Column("additional_context", Text, nullable=True),
    Column("celebrity_recognition", Text, nullable=True),
    Column("is_public", Boolean, nullable=True, server_default="false"),
    Column("is_common_use", Boolean, nullable=True, server_default="false"),
    Column(
        "created_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column("modified_datetime_utc", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_images_public_created", images_table.c.is_public, images_table.c.created_datetime_utc)

# ============================================================================
# CAPTIONS TABLE
# ============================================================================
captions_table = Table(
    "captions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column("content", Text, nullable=True),
    Column("image_id", UUID, ForeignKey("images.id", ondelete="CASCADE"), nullable=True),
    Column(
        "profile_id", UUID, ForeignKey("profiles.id", ondelete="SET NULL"), nullable=True
    ),
    Column("is_public", Boolean, nullable=False, server_default="false"),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
)

Index("idx_captions_image_id", captions_table.c.image_id)

# ============================================================================
# CAPTION VOTES TABLE
# ============================================================================
caption_votes_table = Table(
    "caption_votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="gen_random_uuid()"),
    Column(
        "profile_id", UUID, ForeignKey("profiles.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "caption_id", UUID, ForeignKey("captions.id", ondelete="CASCADE"), nullable=False
    ),
    Column("vote_value", SmallInteger, nullable=False),
    Column(
        "created_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    Column(
        "modified_datetime_utc",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default="NOW()",
    ),
    UniqueConstraint("profile_id", "caption_id", name="uq_caption_votes_profile_caption"),
    CheckConstraint("vote_value IN (1, -1)", name="ck_caption_votes_vote_value"),
)

Index("idx_caption_votes_caption_id", caption_votes_table.c.caption_id)

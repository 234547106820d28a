"""SQLAlchemy table definitions for the blog.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP, TSVECTOR, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(30), nullable=False, unique=True),
    Column("email", String(255), nullable=False, unique=True),  # Lower-cased
    Column("password_hash", Text, nullable=False),
    Column("role", String(20), nullable=False, server_default="User"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("role IN ('Admin', 'Editor', 'User')", name="ck_users_role"),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(200), nullable=False),
    Column("body", Text, nullable=False),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("tags", ARRAY(String(50)), nullable=False, server_default="{}"),
    Column("category", String(20), nullable=False, server_default="General"),
    Column("views", Integer, nullable=False, server_default="0"),
    # Written by the repository from title, body and tags
    Column("search_vector", TSVECTOR, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("views >= 0", name="ck_posts_views_non_negative"),
    CheckConstraint(
        "category IN ('General', 'Technology', 'Development', 'Design', "
        "'Business', 'Lifestyle')",
        name="ck_posts_category",
    ),
)

Index("idx_posts_created_at", posts_table.c.created_at)
Index("idx_posts_category", posts_table.c.category)
Index("idx_posts_tags", posts_table.c.tags, postgresql_using="gin")
Index("idx_posts_search_vector", posts_table.c.search_vector, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE
# ============================================================================
# No foreign key to posts: comments outlive a deleted post.
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("post_id", UUID, nullable=False),
    Column("author_id", UUID, ForeignKey("users.id"), nullable=False),
    Column("text", String(1000), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_comments_post_created", comments_table.c.post_id, comments_table.c.created_at)

# Post columns returned to the domain (the search vector stays in the database)
POST_COLUMNS = [c for c in posts_table.c if c.name != "search_vector"]

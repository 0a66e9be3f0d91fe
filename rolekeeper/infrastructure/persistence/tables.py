"""SQLAlchemy table definitions - dialect-agnostic (works with SQLite and PostgreSQL)."""

from sqlalchemy import (
    Column,
    DateTime,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# ACL PERMISSIONS TABLE (one permission mask per principal)
# ============================================================================
acl_permissions_table = Table(
    "acl_permissions",
    metadata,
    Column("key", String, primary_key=True),  # "<storage_prefix>:<account_id>"
    Column("account_id", String, nullable=False),
    # Decimal text: a 128-bit mask does not fit a BIGINT column
    Column("bits", String(40), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=False),
)

Index("idx_acl_permissions_account_id", acl_permissions_table.c.account_id)


# ============================================================================
# ACL EVENTS TABLE (append-only audit log)
# ============================================================================
acl_events_table = Table(
    "acl_events",
    metadata,
    Column("seq", Integer, primary_key=True, autoincrement=True),  # Emission order
    Column("standard", String(32), nullable=False),
    Column("version", String(16), nullable=False),
    Column("event", String(64), nullable=False),
    Column("role", String(128), nullable=False),
    Column("account_id", String, nullable=False),
    Column("predecessor", String, nullable=False),
    Column("payload", Text, nullable=False),  # Serialized record, byte-for-byte as emitted
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index("idx_acl_events_account_id", acl_events_table.c.account_id)
Index("idx_acl_events_event", acl_events_table.c.event)

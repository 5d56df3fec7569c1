"""
SQLAlchemy Table definitions for the parcel tracker database.

Uses SQLAlchemy Core (not ORM) for flexibility with Pydantic models.
"""

from sqlalchemy import Column, Index, Integer, MetaData, String, Table, Text

metadata = MetaData()

# =============================================================================
# TABLE: parcel
# =============================================================================

parcel = Table(
    "parcel",
    metadata,
    Column("number", Integer, primary_key=True, autoincrement=True),
    Column("client", Integer, nullable=False),
    Column("status", String(20), nullable=False, default="registered"),
    Column("address", Text, nullable=False),
    # RFC 3339 string supplied by the caller, stored verbatim
    Column("created_at", String(32), nullable=False),
)

Index("ix_parcel_client", parcel.c.client)

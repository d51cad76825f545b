import uuid
from sqlalchemy import (
    Column,
    String,
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    Text,
)
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import relationship
from datetime import datetime, timezone

from .database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Script(Base):
    __tablename__ = "scripts"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # opaque identity asserted by the auth gateway; never reassigned
    owner_id = Column(String, nullable=False, index=True)
    title = Column(String, nullable=False)
    script_type = Column(String)
    format_standard = Column(String)
    logline = Column(Text)
    status = Column(String)
    notes = Column(Text)
    created_at = Column(DateTime, default=_utcnow, nullable=False)
    updated_at = Column(DateTime, default=_utcnow, nullable=False)

    versions = relationship("ScriptVersion", back_populates="script")


class ScriptVersion(Base):
    __tablename__ = "script_versions"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    script_id = Column(
        UUID(as_uuid=True), ForeignKey("scripts.id"), nullable=False, index=True
    )
    version_label = Column(String)
    is_preferred = Column(Boolean, default=False, nullable=False)
    raw_content = Column(Text, nullable=False)
    formatted_content = Column(Text)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

    script = relationship("Script", back_populates="versions")


class ScriptElement(Base):
    __tablename__ = "script_elements"
    id = Column(UUID(as_uuid=True), primary_key=True, default=uuid.uuid4)
    # no enforced foreign key: versions are deleted without touching their elements
    script_version_id = Column(UUID(as_uuid=True), nullable=False, index=True)
    order_index = Column(Integer, nullable=False)
    element_type = Column(String, nullable=False)
    character_name = Column(String)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime, default=_utcnow, nullable=False)

"""Global resource catalog schemas.

Resources are described with an entity-attribute-value layout: each resource
type declares its attributes and every resource stores string values for them.
"""

from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    ForeignKey,
    Integer,
    String,
    Text,
    UniqueConstraint,
    func,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from syndicate_backend.database.base import BaseSchema


class ResourceTypeSchema(BaseSchema):
    """Category of catalog resources (``Items``, ``Associates`` ...)."""

    __tablename__ = "resource_types"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    attributes: Mapped[list["ResourceTypeAttributeSchema"]] = relationship(
        back_populates="resource_type", cascade="all, delete-orphan"
    )


class ResourceTypeAttributeSchema(BaseSchema):
    """Attribute declared by a resource type."""

    __tablename__ = "resource_type_attributes"
    __table_args__ = (UniqueConstraint("resource_type_id", "name"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    resource_type_id: Mapped[int] = mapped_column(
        ForeignKey("resource_types.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    data_type: Mapped[str] = mapped_column(String(20), nullable=False, default="integer")
    is_required: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    default_value: Mapped[str | None] = mapped_column(String(255), nullable=True)

    resource_type: Mapped[ResourceTypeSchema] = relationship(back_populates="attributes")


class ResourceSchema(BaseSchema):
    """A single catalog resource."""

    __tablename__ = "resources"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    resource_type_id: Mapped[int] = mapped_column(
        ForeignKey("resource_types.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    resource_type: Mapped[ResourceTypeSchema] = relationship()


class ResourceAttributeValueSchema(BaseSchema):
    """Stored value of one attribute for one resource."""

    __tablename__ = "resource_attribute_values"
    __table_args__ = (UniqueConstraint("resource_id", "attribute_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    resource_id: Mapped[int] = mapped_column(
        ForeignKey("resources.id", ondelete="CASCADE"), nullable=False, index=True
    )
    attribute_id: Mapped[int] = mapped_column(
        ForeignKey("resource_type_attributes.id", ondelete="CASCADE"), nullable=False
    )
    value: Mapped[str] = mapped_column(String(255), nullable=False)


class ResourceSetSchema(BaseSchema):
    """Named subset of the catalog assigned to games."""

    __tablename__ = "resource_sets"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), unique=True, nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)


class ResourceSetItemSchema(BaseSchema):
    """Membership of a resource in a resource set."""

    __tablename__ = "resource_set_items"
    __table_args__ = (UniqueConstraint("resource_set_id", "resource_id"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    resource_set_id: Mapped[int] = mapped_column(
        ForeignKey("resource_sets.id", ondelete="CASCADE"), nullable=False, index=True
    )
    resource_id: Mapped[int] = mapped_column(
        ForeignKey("resources.id", ondelete="CASCADE"), nullable=False
    )

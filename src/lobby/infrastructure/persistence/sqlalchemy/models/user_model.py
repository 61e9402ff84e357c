"""SQLAlchemy models for the User aggregate."""

from __future__ import annotations

from uuid import UUID

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lobby.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class UserModel(Base, TimestampMixin):
    """
    SQLAlchemy model for persisting User aggregates.

    Table: users
    """

    __tablename__ = "users"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)

    identities: Mapped[list[UserIdentityModel]] = relationship(
        "UserIdentityModel",
        back_populates="user",
        cascade="all, delete-orphan",
        lazy="selectin",
    )

    def __repr__(self) -> str:
        return f"<UserModel(id={self.id}, email={self.email})>"


class UserIdentityModel(Base):
    """
    Identity-provider reference linked to a user.

    The reference itself is the primary key, so it can belong to one
    user only.

    Table: user_identities
    """

    __tablename__ = "user_identities"

    identity: Mapped[str] = mapped_column(String(255), primary_key=True)
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    user: Mapped[UserModel] = relationship("UserModel", back_populates="identities")

    def __repr__(self) -> str:
        return f"<UserIdentityModel(identity={self.identity}, user_id={self.user_id})>"

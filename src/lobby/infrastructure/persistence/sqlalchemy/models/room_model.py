"""SQLAlchemy models for the Room aggregate."""

from __future__ import annotations

from typing import Optional
from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, Index, Integer, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from lobby.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin
from lobby.infrastructure.persistence.sqlalchemy.models.game_registration_model import (
    GameRegistrationModel,
)


class RoomModel(Base, TimestampMixin):
    """
    Database model for rooms.

    ``version`` is the optimistic-lock counter. The application sets the
    next value itself; SQLAlchemy adds ``WHERE version = <loaded>`` to every
    UPDATE and raises StaleDataError when no row matched.

    Table: rooms
    """

    __tablename__ = "rooms"

    __table_args__ = (Index("ix_rooms_status_created_at", "status", "created_at"),)

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    game_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("game_registrations.id", ondelete="RESTRICT"),
        nullable=False,
        index=True,
    )
    host_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    host_nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    password: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    min_players: Mapped[int] = mapped_column(Integer, nullable=False)
    max_players: Mapped[int] = mapped_column(Integer, nullable=False)
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    game: Mapped[GameRegistrationModel] = relationship(
        "GameRegistrationModel",
        lazy="joined",
    )
    players: Mapped[list[RoomPlayerModel]] = relationship(
        "RoomPlayerModel",
        back_populates="room",
        cascade="all, delete-orphan",
        order_by="RoomPlayerModel.position",
        lazy="selectin",
    )

    __mapper_args__ = {
        "version_id_col": version,
        "version_id_generator": False,
    }

    def __repr__(self) -> str:
        return (
            f"<RoomModel(id={self.id}, name={self.name}, "
            f"status={self.status}, version={self.version})>"
        )


class RoomPlayerModel(Base):
    """
    Membership of a user in a room.

    ``player_id`` is unique across the table: a user can sit in one room
    at a time, and two racing joins for the same user cannot both commit.

    Table: room_players
    """

    __tablename__ = "room_players"

    room_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("rooms.id", ondelete="CASCADE"),
        primary_key=True,
    )
    player_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        unique=True,
    )
    nickname: Mapped[str] = mapped_column(String(100), nullable=False)
    readiness: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    position: Mapped[int] = mapped_column(Integer, nullable=False)

    room: Mapped[RoomModel] = relationship("RoomModel", back_populates="players")

    def __repr__(self) -> str:
        return (
            f"<RoomPlayerModel(room_id={self.room_id}, player_id={self.player_id}, "
            f"readiness={self.readiness})>"
        )

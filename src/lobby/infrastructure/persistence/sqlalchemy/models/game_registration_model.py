"""SQLAlchemy model for game registrations."""

from uuid import UUID

from sqlalchemy import CheckConstraint, String, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from lobby.infrastructure.persistence.sqlalchemy.models.base import Base, TimestampMixin


class GameRegistrationModel(Base, TimestampMixin):
    """Database model for registered games.

    Table: game_registrations
    """

    __tablename__ = "game_registrations"

    # Duplicates the domain validation of the player bounds
    __table_args__ = (
        CheckConstraint(
            "min_players > 0 AND min_players <= max_players",
            name="ck_game_registration_player_bounds",
        ),
    )

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True)
    unique_name: Mapped[str] = mapped_column(
        String(100),
        unique=True,
        nullable=False,
        index=True,
    )
    display_name: Mapped[str] = mapped_column(String(255), nullable=False)
    short_description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    rule: Mapped[str] = mapped_column(Text, nullable=False, default="")
    image_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    min_players: Mapped[int] = mapped_column(nullable=False)
    max_players: Mapped[int] = mapped_column(nullable=False)
    front_end_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")
    back_end_url: Mapped[str] = mapped_column(String(2048), nullable=False, default="")

    def __repr__(self) -> str:
        return (
            f"<GameRegistrationModel(id={self.id}, unique_name={self.unique_name})>"
        )

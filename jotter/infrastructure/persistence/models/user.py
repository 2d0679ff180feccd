"""User ORM model for authentication and profile."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from jotter.domain.enums import RowStatus, UserRole
from jotter.infrastructure.persistence.database import Base
from jotter.infrastructure.persistence.models.mixins import IntegerIdMixin, TimestampMixin


class User(IntegerIdMixin, TimestampMixin, Base):
    """User model. Table: user. Username is unique; email is indexed for lookup."""

    __tablename__ = "user"

    username: Mapped[str] = mapped_column(String(32), nullable=False, unique=True)
    role: Mapped[str] = mapped_column(
        String(16), nullable=False, default=UserRole.USER.value
    )
    email: Mapped[str] = mapped_column(String(256), nullable=False, default="", index=True)
    nickname: Mapped[str] = mapped_column(String(64), nullable=False, default="")
    password_hash: Mapped[str] = mapped_column(String, nullable=False)
    avatar_url: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    row_status: Mapped[str] = mapped_column(
        String(16), nullable=False, default=RowStatus.NORMAL.value
    )

"""User model for renters and lessors."""
from __future__ import annotations

import enum
from typing import TYPE_CHECKING

from sqlalchemy import Enum, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from buurbak.db.base import Base
from buurbak.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin

if TYPE_CHECKING:  # pragma: no cover - typing only imports
    from buurbak.models.blocked_period import BlockedPeriod
    from buurbak.models.trailer import Trailer


class UserRole(str, enum.Enum):
    """Role enumeration for marketplace permissions."""

    USER = "user"
    LESSOR = "lessor"
    ADMIN = "admin"


class UserStatus(str, enum.Enum):
    """Enumerates user activation states."""

    ACTIVE = "active"
    SUSPENDED = "suspended"


class User(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Marketplace identity; lessors own trailers, everyone can rent."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False)
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    first_name: Mapped[str] = mapped_column(String(120), nullable=False)
    last_name: Mapped[str] = mapped_column(String(120), nullable=False)
    role: Mapped[UserRole] = mapped_column(
        Enum(UserRole), default=UserRole.USER, nullable=False
    )
    status: Mapped[UserStatus] = mapped_column(
        Enum(UserStatus), default=UserStatus.ACTIVE, nullable=False
    )

    trailers: Mapped[list["Trailer"]] = relationship(
        "Trailer", back_populates="owner", cascade="all, delete-orphan"
    )
    blocked_periods: Mapped[list["BlockedPeriod"]] = relationship(
        "BlockedPeriod", back_populates="user", cascade="all, delete-orphan"
    )

    @property
    def is_lessor(self) -> bool:
        return self.role in {UserRole.LESSOR, UserRole.ADMIN}

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

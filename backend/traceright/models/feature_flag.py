"""Feature flag model.

Flags gate client features at runtime without a deployment. ``enabled`` is an
integer bit (0/1); ``required_role`` restricts a flag to admins.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from traceright.db.base import Base, TimestampMixin, enum_values
from traceright.models.user import UserRole


class FeatureFlag(Base, TimestampMixin):
    __tablename__ = "feature_flags"

    id: Mapped[int] = mapped_column(primary_key=True)
    key: Mapped[str] = mapped_column(String(128), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    enabled: Mapped[int] = mapped_column(Integer, default=0, server_default="0", nullable=False)
    category: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    required_role: Mapped[Optional[UserRole]] = mapped_column(
        enum_values(UserRole), default=UserRole.USER, nullable=True
    )

from __future__ import annotations

from sqlalchemy import BigInteger, Boolean, Integer, String, Text, false
from sqlalchemy.orm import Mapped, mapped_column

from forumhub.db.base import Base

TITLE_MAX_LENGTH = 255


class Topic(Base):
    __tablename__ = "topics"
    # Keep SQLite from reusing the ids of deleted rows.
    __table_args__ = {"sqlite_autoincrement": True}

    # SQLite only autoincrements a column declared exactly INTEGER
    id: Mapped[int] = mapped_column(
        BigInteger().with_variant(Integer, "sqlite"), primary_key=True, autoincrement=True
    )
    title: Mapped[str] = mapped_column(String(TITLE_MAX_LENGTH), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    # Soft-hide marker; read paths do not filter on it.
    hidden: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, server_default=false())

    def __repr__(self) -> str:
        return f"Topic(id={self.id!r}, title={self.title!r}, hidden={self.hidden!r})"

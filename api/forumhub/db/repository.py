"""Persistence gateway for topics. Every call is its own transaction."""
from __future__ import annotations

from typing import Protocol

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from forumhub.db.models import Topic


class TopicRepository(Protocol):
    async def save(self, topic: Topic) -> Topic: ...

    async def find_all(self) -> list[Topic]: ...

    async def find_by_id(self, topic_id: int) -> Topic | None: ...

    async def exists_by_id(self, topic_id: int) -> bool: ...

    async def delete_by_id(self, topic_id: int) -> None: ...


class SqlTopicRepository:
    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def save(self, topic: Topic) -> Topic:
        """Insert when the topic has no id yet, otherwise write it over the stored row."""
        if topic.id is None:
            self._session.add(topic)
        else:
            topic = await self._session.merge(topic)
        await self._session.commit()
        await self._session.refresh(topic)
        return topic

    async def find_all(self) -> list[Topic]:
        result = await self._session.execute(select(Topic).order_by(Topic.id))
        return list(result.scalars().all())

    async def find_by_id(self, topic_id: int) -> Topic | None:
        return await self._session.get(Topic, topic_id)

    async def exists_by_id(self, topic_id: int) -> bool:
        return bool(await self._session.scalar(select(exists().where(Topic.id == topic_id))))

    async def delete_by_id(self, topic_id: int) -> None:
        # Missing ids are a no-op; callers check exists_by_id for not-found.
        await self._session.execute(delete(Topic).where(Topic.id == topic_id))
        await self._session.commit()

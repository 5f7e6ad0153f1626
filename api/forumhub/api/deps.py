from __future__ import annotations

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from forumhub.db.repository import SqlTopicRepository, TopicRepository
from forumhub.db.session import get_session


async def get_topic_repository(session: AsyncSession = Depends(get_session)) -> TopicRepository:
    return SqlTopicRepository(session)

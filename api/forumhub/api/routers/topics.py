from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Path, Response, status

from forumhub.api.deps import get_topic_repository
from forumhub.api.errors import TopicNotFound
from forumhub.db.models import Topic
from forumhub.db.repository import TopicRepository
from forumhub.schemas.topic import TopicIn, TopicOut

router = APIRouter(prefix="/api/topics", tags=["topics"])
logger = logging.getLogger(__name__)

# Ids are BIGINT-sized; anything outside that range is a bad request, not a lookup.
TopicId = Annotated[int, Path(ge=-(2**63), le=2**63 - 1)]


async def _get_or_404(repo: TopicRepository, topic_id: int) -> Topic:
    topic = await repo.find_by_id(topic_id)
    if topic is None:
        raise TopicNotFound(topic_id)
    return topic


@router.post("", response_model=TopicOut)
async def create_topic(
    payload: TopicIn,
    repo: TopicRepository = Depends(get_topic_repository),
) -> Topic:
    topic = await repo.save(Topic(title=payload.title, content=payload.content, hidden=False))
    logger.info("Created topic %s", topic.id)
    return topic


@router.get("", response_model=list[TopicOut])
async def list_topics(repo: TopicRepository = Depends(get_topic_repository)) -> list[Topic]:
    return await repo.find_all()


@router.get("/{topic_id}", response_model=TopicOut)
async def get_topic(topic_id: TopicId, repo: TopicRepository = Depends(get_topic_repository)) -> Topic:
    return await _get_or_404(repo, topic_id)


@router.put("/{topic_id}", response_model=TopicOut)
async def update_topic(
    topic_id: TopicId,
    payload: TopicIn,
    repo: TopicRepository = Depends(get_topic_repository),
) -> Topic:
    topic = await _get_or_404(repo, topic_id)
    # id and hidden stay as stored
    topic.title = payload.title
    topic.content = payload.content
    topic = await repo.save(topic)
    logger.info("Updated topic %s", topic_id)
    return topic


@router.delete("/{topic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_topic(topic_id: TopicId, repo: TopicRepository = Depends(get_topic_repository)) -> Response:
    if not await repo.exists_by_id(topic_id):
        raise TopicNotFound(topic_id)
    await repo.delete_by_id(topic_id)
    logger.info("Deleted topic %s", topic_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/{topic_id}/hide", response_model=TopicOut)
async def hide_topic(topic_id: TopicId, repo: TopicRepository = Depends(get_topic_repository)) -> Topic:
    """Mark a topic as hidden without removing it. Hidden topics still show up in every read."""
    topic = await _get_or_404(repo, topic_id)
    topic.hidden = True
    topic = await repo.save(topic)
    logger.info("Hid topic %s", topic_id)
    return topic

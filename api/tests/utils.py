import itertools

from forumhub.db.models import Topic


def _clone(topic: Topic) -> Topic:
    return Topic(id=topic.id, title=topic.title, content=topic.content, hidden=topic.hidden)


class InMemoryTopicRepository:
    """Dict-backed TopicRepository for handler tests."""

    def __init__(self):
        self.rows: dict[int, Topic] = {}
        self._ids = itertools.count(1)
        self.calls: list[str] = []

    async def save(self, topic):
        self.calls.append("save")
        if topic.id is None:
            topic.id = next(self._ids)
        if topic.hidden is None:
            topic.hidden = False
        self.rows[topic.id] = _clone(topic)
        return _clone(topic)

    async def find_all(self):
        self.calls.append("find_all")
        return [_clone(self.rows[key]) for key in sorted(self.rows)]

    async def find_by_id(self, topic_id):
        self.calls.append("find_by_id")
        topic = self.rows.get(topic_id)
        return _clone(topic) if topic is not None else None

    async def exists_by_id(self, topic_id):
        self.calls.append("exists_by_id")
        return topic_id in self.rows

    async def delete_by_id(self, topic_id):
        self.calls.append("delete_by_id")
        self.rows.pop(topic_id, None)

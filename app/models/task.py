from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Mapping

COLLECTION_NAME = "tasks"

# Fields a PUT may overwrite; _id and createdAt are fixed at creation.
UPDATABLE_FIELDS = ("title", "completed")


def utc_now() -> datetime:
    # Mongo keeps millisecond precision; truncate so stored and returned values agree.
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=now.microsecond // 1000 * 1000)


def _as_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


@dataclass
class Task:
    id: str
    title: str
    completed: bool
    created_at: datetime

    @classmethod
    def from_document(cls, doc: Mapping[str, Any]) -> "Task":
        return cls(
            id=str(doc["_id"]),
            title=doc["title"],
            completed=bool(doc.get("completed", False)),
            created_at=_as_utc(doc["createdAt"]),
        )


def new_task_document(title: str) -> Dict[str, Any]:
    return {
        "title": title,
        "completed": False,
        "createdAt": utc_now(),
    }

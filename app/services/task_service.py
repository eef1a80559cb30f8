# app/services/task_service.py
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import PyMongoError

from app.core.errors import NotFoundError, StorageError, ValidationError
from app.models.task import Task, new_task_document
from app.services.validation import validate_patch, validate_title

logger = logging.getLogger(__name__)

TASK_NOT_FOUND = "Task not found"


@contextmanager
def _storage_errors() -> Iterator[None]:
    try:
        yield
    except PyMongoError as exc:
        logger.warning("Task storage operation failed: %s", exc)
        raise StorageError(str(exc)) from exc


def _object_id(task_id: str) -> Optional[ObjectId]:
    if not ObjectId.is_valid(task_id):
        return None
    return ObjectId(task_id)


def list_tasks(db: Collection) -> List[Task]:

    with _storage_errors():
        docs = list(db.find().sort([("createdAt", DESCENDING), ("_id", DESCENDING)]))
    return [Task.from_document(d) for d in docs]


def create_task(db: Collection, title: Any) -> Task:

    result = validate_title(title)
    if not result.ok:
        raise ValidationError(result.error)

    doc = new_task_document(result.value)
    with _storage_errors():
        inserted = db.insert_one(doc)
    doc["_id"] = inserted.inserted_id
    logger.info("Created task %s", doc["_id"])
    return Task.from_document(doc)


def get_task(db: Collection, task_id: str) -> Optional[Task]:

    oid = _object_id(task_id)
    if oid is None:
        return None
    with _storage_errors():
        doc = db.find_one({"_id": oid})
    return Task.from_document(doc) if doc else None


def update_task(db: Collection, task_id: str, patch: Mapping[str, Any]) -> Task:

    result = validate_patch(patch)
    if not result.ok:
        raise ValidationError(result.error)
    fields: Dict[str, Any] = result.value

    if not fields:
        task = get_task(db, task_id)
        if task is None:
            raise NotFoundError(TASK_NOT_FOUND)
        return task

    oid = _object_id(task_id)
    if oid is None:
        raise NotFoundError(TASK_NOT_FOUND)
    with _storage_errors():
        doc = db.find_one_and_update(
            {"_id": oid},
            {"$set": fields},
            return_document=ReturnDocument.AFTER,
        )
    if doc is None:
        raise NotFoundError(TASK_NOT_FOUND)
    logger.info("Updated task %s: %s", task_id, sorted(fields))
    return Task.from_document(doc)


def delete_task(db: Collection, task_id: str) -> Dict[str, str]:

    oid = _object_id(task_id)
    if oid is None:
        raise NotFoundError(TASK_NOT_FOUND)
    with _storage_errors():
        deleted = db.delete_one({"_id": oid})
    if deleted.deleted_count == 0:
        raise NotFoundError(TASK_NOT_FOUND)
    logger.info("Deleted task %s", task_id)
    return {"message": "Task deleted"}

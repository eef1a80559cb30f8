# app/api/routes_tasks.py
from typing import Optional

from fastapi import APIRouter, Depends, status
from pymongo.collection import Collection

from app.core.db import get_tasks_collection
from app.schemas.task import (
    ErrorResponse,
    MessageResponse,
    TaskCreate,
    TaskList,
    TaskRead,
    TaskUpdate,
)
from app.services.task_service import create_task, delete_task, list_tasks, update_task

router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
    responses={500: {"model": ErrorResponse}},
)


@router.get("", response_model=TaskList)
def list_tasks_endpoint(db: Collection = Depends(get_tasks_collection)):
    tasks = list_tasks(db)
    return {"tasks": tasks, "total": len(tasks)}


@router.post(
    "",
    response_model=TaskRead,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}},
)
def create_task_endpoint(
    task_in: Optional[TaskCreate] = None,
    db: Collection = Depends(get_tasks_collection),
):
    task = create_task(db, task_in.title if task_in else None)
    return task


@router.put(
    "/{task_id}",
    response_model=TaskRead,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
)
def update_task_endpoint(
    task_id: str,
    task_in: Optional[TaskUpdate] = None,
    db: Collection = Depends(get_tasks_collection),
):
    patch = task_in.model_dump(exclude_unset=True) if task_in else {}
    return update_task(db, task_id, patch)


@router.delete(
    "/{task_id}",
    response_model=MessageResponse,
    responses={404: {"model": ErrorResponse}},
)
def delete_task_endpoint(task_id: str, db: Collection = Depends(get_tasks_collection)):
    return delete_task(db, task_id)

# app/services/__init__.py
from .health_service import build_health_report
from .task_service import create_task, delete_task, get_task, list_tasks, update_task

__all__ = [
    "build_health_report",
    "create_task",
    "delete_task",
    "get_task",
    "list_tasks",
    "update_task",
]

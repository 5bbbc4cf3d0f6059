"""Reservation task API actions."""

from ..models.tasks import CreateTaskRequest, Task
from .base import ApiGroup


class TasksApi(ApiGroup):
    def create(self, reservation_id: int | str, task: CreateTaskRequest) -> Task:
        """Create a new task for a reservation."""
        path = f"/sales/reservations/{reservation_id}/tasks"
        return self._parse(Task, self._post(path, task), path)

    def list(self, reservation_id: int | str) -> list[Task]:
        data = self._get(f"/sales/reservations/{reservation_id}/tasks")
        return [Task.model_validate(item) for item in data or []]

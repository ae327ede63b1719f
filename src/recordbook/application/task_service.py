"""Task add, lookup, field updates, and delete."""

from recordbook.application.keyed_service import KeyedRecordService
from recordbook.domain import Task


class TaskService(KeyedRecordService[Task]):
    """Keeps tasks by task_id. Pass a LockingRepository to share the service between threads."""

    record_type = Task
    id_attribute = "task_id"
    null_record_message = "Task cannot be null"
    null_id_message = "Task ID cannot be null"
    duplicate_message = "Task with ID '{key}' already exists"
    not_found_message = "Task with ID '{key}' does not exist"

    def add_task(self, task: Task) -> Task:
        return self._add(task)

    def create_task(self, task_id: str, task_name: str, task_description: str) -> Task:
        return self._add(Task(task_id, task_name, task_description))

    def get_task(self, task_id: str) -> Task:
        return self._require(task_id)

    def delete_task(self, task_id: str) -> None:
        self._delete(task_id)

    def update_task_name(self, task_id: str, task_name: str) -> None:
        self._update(task_id, "task_name", task_name)

    def update_task_description(self, task_id: str, task_description: str) -> None:
        self._update(task_id, "task_description", task_description)

    def task_count(self) -> int:
        return len(self)

    def task_exists(self, task_id: str) -> bool:
        """Membership check. Unlike `in`, a None id is an error."""
        if task_id is None:
            raise ValueError(self.null_id_message)
        return self._repo.contains(task_id)

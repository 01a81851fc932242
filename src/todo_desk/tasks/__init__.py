"""
Task subsystem.

Components:
- task_models.py: Task dataclass + on-disk field names and timestamp format
- task_store.py: in-memory list mirrored to a JSON snapshot file
- task_api.py: UI-facing helpers (add_todo / get_todos / update_todo / remove_todo)
"""

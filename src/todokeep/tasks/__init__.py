"""
Task subsystem.

Components:
- task_models.py: the Task record and its on-disk dict form
- task_store.py: in-memory task list + id assignment
- task_file.py: JSON file load/save for a TaskStore
"""

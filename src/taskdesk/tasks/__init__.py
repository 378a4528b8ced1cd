"""
Task subsystem.

Components:
- task_models.py: data structures (Task, TaskDraft)
- task_client.py: httpx-based REST client for the task service
- task_list.py: local task collection kept in sync with the service
- task_form.py: create/edit draft + submission
- task_api.py: small high-level helpers used by the console
- offline.py: in-memory task service for demos and tests
"""

"""
Task subsystem.

Components:
- task_models.py: data structures (Task, EmptyTaskError)
- task_store.py: in-memory authoritative list + mutations + observers
- task_file.py: `<text>,<flag>` line-file persistence
"""

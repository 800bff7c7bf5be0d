"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- task_collection.py: in-memory collection, id assignment, filtered views
- task_store.py: JSON file load/save + auxiliary file helpers
"""

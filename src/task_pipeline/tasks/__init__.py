"""
Task subsystem.

Components:
- task_models.py: data structures (Task, Priority, Status)
- predicates.py: composable Task -> bool tests
- transformers.py: composable Task -> Task copies
- processors.py: sequence -> sequence pipeline stages
- comparators.py: three-way comparators for multi-key sorting
"""

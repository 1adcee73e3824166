"""
Schedule subsystem.

Components:
- task_models.py: data structures (Task, Priority)
- results.py: Ok/Err result values and error kinds
- task_factory.py: builds validated tasks from raw text
- schedule_manager.py: ordered, conflict-free task collection + observer fan-out
- notifiers.py: concrete observers (console notifier per crew member)
"""

"""
Task subsystem.

Components:
- task_models.py: Task entity, clock-time validation, overlap rule
- task_codec.py: pipe-delimited line format
- task_file.py: flat-file repository (full rewrite on save)
- schedule_store.py: in-memory schedule enforcing the invariants + conflict observers
- task_api.py: command surface returning CommandResult values
"""

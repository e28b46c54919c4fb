"""Task Manager Application Package — task-tracking HTTP service.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

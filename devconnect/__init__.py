"""DevConnect Application Package - developer profiles and account registration.

Invariants:
    - Package root contains no executable code (import side-effects prohibited)
"""

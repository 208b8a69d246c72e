# user_error/core/__init__.py
"""
Core logic: the structured error value, cause-chain derivation and coercion.

Nothing in here writes to a stream except the explicit print helpers.
"""

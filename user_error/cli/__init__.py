# user_error/cli/__init__.py
"""
Presentation layer: text rendering, the terminal probe and the `user-error` command.
"""

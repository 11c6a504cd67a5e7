"""
Top‑level package for the Hello Todo API.

This file makes ``hello_todo_api`` a Python package so that modules
within ``app`` can be imported using fully qualified names like
``hello_todo_api.app.main``.

The package provides no public exports; all functionality lives in
submodules under ``app``.
"""

__all__ = []

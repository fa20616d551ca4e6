"""
Editor Module

Edit controller that applies user edits and keeps validation current.
"""

from .controller import EditController, StateListener

__all__ = [
    "EditController",
    "StateListener",
]

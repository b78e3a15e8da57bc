"""
Utils package initialization.
"""
from .error_handling import handle_error, handle_load_error

__all__ = [
    'handle_error',
    'handle_load_error',
]

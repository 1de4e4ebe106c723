"""
Domain services for the Exercise Tracker API.

Pure functions operating on domain models, with no I/O.
"""

from domain.services.log_filter import filter_exercise_log, log_order_key

__all__ = [
    "filter_exercise_log",
    "log_order_key",
]

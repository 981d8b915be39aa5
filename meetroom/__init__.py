"""
meetroom - group availability rooms with date-range validation and
per-slot availability aggregation.
"""

__version__ = "0.1.0"

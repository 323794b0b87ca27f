"""
between - shows the free spaces between the busy blocks of a day.
"""

__version__ = "0.1.0"

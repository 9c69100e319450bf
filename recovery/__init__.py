"""Account recovery service.

Password recovery via time-limited, e-mailed recovery tokens.
"""

__version__ = "0.1.0"

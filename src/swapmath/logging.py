import logging

"""
The package logger. Applications may attach their own handlers or change the level.
"""

logger = logging.getLogger("swapmath")
logger.propagate = False
logger.setLevel(logging.INFO)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
logger.addHandler(_handler)

import logging

"""
Package-wide logger. Records are not propagated to the root logger, so applications embedding
this package see its output only through the handler attached here.
"""

logger = logging.getLogger("chaintokens")
logger.propagate = False
logger.setLevel(logging.INFO)

_handler = logging.StreamHandler()
_handler.setFormatter(logging.Formatter("%(name)s %(levelname)s: %(message)s"))
logger.addHandler(_handler)

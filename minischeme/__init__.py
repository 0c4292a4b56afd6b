# Core type aliases for the minischeme data model.
# Values are plain Python objects: int (Integer), bool (Boolean), Symbol,
# Pair, Procedure, and the Nil singleton for the empty list.
#
# Expression is used by the reader, the evaluator and the builtins alike;
# code and data share one representation.

from typing import Any

Expression = Any

__all__ = ["Expression"]

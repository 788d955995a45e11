from __future__ import annotations

from . import option, result
from .comprehension import collect, comprehend
from .errors import Error, OutcomeError
from .option import Absent, Option, OptionBuilder, Present
from .result import UNINITIALIZED, Failure, Result, ResultBuilder, Success, Uninitialized
from .sequence import STOP, Builder, Collectable, ListBuilder, SequenceView, Stop

__version__ = "0.1.0"

__all__ = [
    "Absent",
    "Builder",
    "Collectable",
    "Error",
    "Failure",
    "ListBuilder",
    "Option",
    "OptionBuilder",
    "OutcomeError",
    "Present",
    "Result",
    "ResultBuilder",
    "STOP",
    "SequenceView",
    "Stop",
    "Success",
    "UNINITIALIZED",
    "Uninitialized",
    "collect",
    "comprehend",
    "option",
    "result",
]

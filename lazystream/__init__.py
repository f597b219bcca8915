r"""
'     __    ___  _______  __  __
'    / /   /   |/__  /\ \/ / / /_____________  ____ _____ ___
'   / /   / /| |  / /  \  / / __/ ___/ ___/ _ \/ __ `/ __ `__ \
'  / /___/ ___ | / /__ / / (__  ) /_/ /  /  __/ /_/ / / / / / /
' /_____/_/  |_|/____//_/ /____/\__/_/   \___/\__,_/_/ /_/ /_/
"""

# expose the main class
from .stream import Stream, EMPTY

# expose the factory functions
from .factories import (
    empty,
    cons,
    stream,
    unfold,
    of_collection,
    from_iterable,
    from_iterator,
    constant,
    from_,
    count_from,
    from_range,
    repeat,
    generate,
    iterate
)

# expose the building blocks
from .types import Pair, Result
from .trampoline import Trampoline, done, pending, run_to_completion
from .suppliers import Memoized, memoize, supplier, tap
from .errors import UnsupportedOperationError

# define what `import *` does
__all__ = [
    "Stream",
    "EMPTY",
    "empty",
    "cons",
    "stream",
    "unfold",
    "of_collection",
    "from_iterable",
    "from_iterator",
    "constant",
    "from_",
    "count_from",
    "from_range",
    "repeat",
    "generate",
    "iterate",
    "Pair",
    "Result",
    "Trampoline",
    "done",
    "pending",
    "run_to_completion",
    "Memoized",
    "memoize",
    "supplier",
    "tap",
    "UnsupportedOperationError"
]

class UnsupportedOperationError(RuntimeError):
    """raised when an object is used against its contract, e.g. reading the result of an unfinished trampoline."""
    pass

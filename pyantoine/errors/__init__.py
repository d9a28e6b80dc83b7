from .errors import AntoineError, ValidationError, ArgumentCountError, NoConvergenceError, WebbookError, AmbiguousSearchError, WebbookParseError

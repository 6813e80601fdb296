class InvalidArgumentError(ValueError):
    """
    Raised when a caller passes a parameter outside its valid domain,
    e.g. a sample count that is not a positive integer.
    """


def require_positive_int(name: str, value: object) -> int:
    # bool is an int subclass; True must not count as one sample
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentError(
            f"{name} must be a positive integer, got {type(value).__name__}"
        )
    if value <= 0:
        raise InvalidArgumentError(f"{name} must be > 0, got {value}")
    return value

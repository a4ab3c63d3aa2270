"""Basic integer helper functions."""


def sign(n: int) -> int:
    """Return -1 if n < 0, 0 if n == 0 and +1 if n > 0."""
    if n < 0:
        return -1
    if n > 0:
        return +1
    return 0
"""Sampling grids over the normalized domain."""


def sample_unit_interval(n: int) -> list[float]:
    """Generate N evenly-spaced samples covering [0, 1].

    Returns N samples: [0.0, 1/(N-1), ..., 1.0]

    Args:
        n: Number of samples to generate. Must be >= 2.

    Returns:
        List of N evenly-spaced float values, both endpoints included.

    Raises:
        ValueError: If n < 2.

    Example:
        >>> sample_unit_interval(5)
        [0.0, 0.25, 0.5, 0.75, 1.0]
    """
    if n < 2:
        raise ValueError("n must be >= 2")
    return [i / (n - 1) for i in range(n)]

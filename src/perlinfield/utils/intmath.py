"""
Integer helpers for lattice sizing.

Exact integer arithmetic only: no intermediate float division, so results
hold for arbitrarily large Python ints.

Only ``div_ceil`` is used by the noise core (to size each octave's
gradient grid); the remaining helpers round out the bit-twiddling toolkit.
"""


def div_ceil(a: int, b: int) -> int:
    """
    Quotient of ``a / b`` rounded toward positive infinity.

    Args:
        a: Dividend
        b: Divisor (non-zero)

    Returns:
        ``ceil(a / b)`` computed exactly

    Raises:
        ZeroDivisionError: If ``b == 0``

    Example:
        >>> div_ceil(512, 128)
        4
        >>> div_ceil(513, 128)
        5
    """
    return -((-a) // b)


def div_floor(a: int, b: int) -> int:
    """Quotient of ``a / b`` rounded toward negative infinity."""
    return a // b


def gcd(a: int, b: int) -> int:
    """
    Greatest common divisor via the binary (Stein) algorithm.

    Operates on absolute values; ``gcd(0, b) == abs(b)``.
    """
    a, b = abs(a), abs(b)
    if a == 0 or b == 0:
        return a | b

    shift = trailing_zeros(a | b)
    a >>= trailing_zeros(a)
    b >>= trailing_zeros(b)

    while a != b:
        if a > b:
            a -= b
            a >>= trailing_zeros(a)
        else:
            b -= a
            b >>= trailing_zeros(b)

    return a << shift


def trailing_zeros(a: int) -> int:
    """Number of trailing zero bits of a non-zero int."""
    if a == 0:
        raise ValueError("trailing_zeros is undefined for 0")
    return (a & -a).bit_length() - 1


def lowest_one(a: int) -> int:
    """Value of the lowest set bit (0 for 0)."""
    return a & -a


def sig_bits(a: int) -> int:
    """Number of significant bits of a non-negative int (0 for 0)."""
    if a < 0:
        raise ValueError(f"sig_bits requires a non-negative value, got {a}")
    return a.bit_length()


def highest_one(a: int) -> int:
    """Value of the highest set bit of a non-negative int (0 for 0)."""
    if a == 0:
        return 0
    return 1 << (sig_bits(a) - 1)

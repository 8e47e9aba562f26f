"""
Hilbert curve transform on a dim x dim grid.

Based on the iterative formulation at
https://en.wikipedia.org/w/index.php?title=Hilbert_curve&oldid=797332503

Both directions walk the bit planes of the grid: encoding goes from the
coarsest quadrant to the finest, decoding from the finest to the coarsest.
"""

from typing import Tuple


def _check_dim(dim: int) -> None:
    if dim < 1 or dim & (dim - 1):
        raise ValueError(f"dim must be a positive power of two, got {dim}")


def rotate(n: int, x: int, y: int, rx: int, ry: int) -> Tuple[int, int]:
    """
    Rotate and flip a quadrant of size n.

    In the lower quadrants (ry == 0) the sub-curve is transposed, and in the
    lower-right one (rx == 1) it is also mirrored about the quadrant center.
    """
    if ry == 0:
        if rx == 1:
            x = n - 1 - x
            y = n - 1 - y
        return y, x
    return x, y


def xy2hash(x: int, y: int, dim: int) -> int:
    """
    Convert a grid cell to its distance along the Hilbert curve.

    Args:
        x: Column of the cell, in [0, dim)
        y: Row of the cell, in [0, dim)
        dim: Side length of the grid, a power of two

    Returns:
        Curve distance in [0, dim**2)
    """
    _check_dim(dim)
    if not (0 <= x < dim and 0 <= y < dim):
        raise ValueError(f"Point ({x}, {y}) is outside the {dim}x{dim} grid")

    d = 0
    lvl = dim >> 1
    while lvl > 0:
        rx = 1 if x & lvl else 0
        ry = 1 if y & lvl else 0
        d += lvl * lvl * ((3 * rx) ^ ry)
        x, y = rotate(lvl, x, y, rx, ry)
        lvl >>= 1
    return d


def hash2xy(hashcode: int, dim: int) -> Tuple[int, int]:
    """
    Convert a Hilbert curve distance back to its grid cell.

    Args:
        hashcode: Curve distance in [0, dim**2)
        dim: Side length of the grid, a power of two

    Returns:
        (x, y) cell in the dim x dim grid
    """
    _check_dim(dim)
    if not 0 <= hashcode < dim * dim:
        raise ValueError(f"Hash {hashcode} is outside [0, {dim * dim})")

    x = y = 0
    lvl = 1
    while lvl < dim:
        rx = 1 & (hashcode >> 1)
        ry = 1 & (hashcode ^ rx)
        x, y = rotate(lvl, x, y, rx, ry)
        x += lvl * rx
        y += lvl * ry
        hashcode >>= 2
        lvl <<= 1
    return x, y

"""Nested-list tensors and swapping of their last two dimensions."""

from __future__ import annotations

import argparse
import math
import sys
from typing import Any, Iterator, Sequence


def _shape(tensor: Any) -> tuple[int, ...]:
    dims = []
    node = tensor
    while isinstance(node, list):
        dims.append(len(node))
        if not node:
            break
        node = node[0]
    return tuple(dims)


def _flatten(tensor: Any) -> Iterator[Any]:
    if isinstance(tensor, list):
        for child in tensor:
            yield from _flatten(child)
    else:
        yield tensor


def arange_tensor(shape: Sequence[int]) -> list:
    """Build a tensor of ``shape`` filled with 0, 1, 2, ... in row-major order."""
    dims = tuple(shape)
    if not dims:
        raise ValueError("shape must have at least one dimension")
    if any(d < 0 for d in dims):
        raise ValueError("dimensions must be non-negative")
    values = iter(range(math.prod(dims)))

    def build(level: int) -> list:
        if level == len(dims) - 1:
            return [next(values) for _ in range(dims[level])]
        return [build(level + 1) for _ in range(dims[level])]

    return build(0)


def swap_last_two(tensor: list) -> list:
    """Return a new tensor with the last two dimensions exchanged."""
    rank = len(_shape(tensor))
    if rank < 2:
        raise ValueError("tensor needs at least two dimensions")

    def swap(node: list, depth: int) -> list:
        if depth == 2:
            return [list(column) for column in zip(*node)]
        return [swap(child, depth - 1) for child in node]

    return swap(tensor, rank)


def _matrices(node: list, depth: int, index: tuple[int, ...]) -> Iterator[tuple[tuple[int, ...], list]]:
    if depth == 2:
        yield index, node
        return
    for position, child in enumerate(node):
        yield from _matrices(child, depth - 1, index + (position,))


def format_tensor(tensor: list) -> str:
    """Render a tensor as slices of aligned rows followed by a type and shape line."""
    shape = _shape(tensor)
    if not shape:
        raise ValueError("tensor must be a list")
    values = list(_flatten(tensor))
    width = max((len(str(v)) for v in values), default=1)
    type_name = "CPULongType" if all(isinstance(v, int) for v in values) else "CPUFloatType"

    def rows(matrix: list) -> list[str]:
        return ["  " + " ".join(str(v).rjust(width) for v in row) for row in matrix]

    lines: list[str] = []
    if len(shape) == 1:
        lines.extend(" " + str(v).rjust(width) for v in tensor)
    elif len(shape) == 2:
        lines.extend(rows(tensor))
    else:
        for index, matrix in _matrices(tensor, len(shape), ()):
            label = ",".join(str(i + 1) for i in index)
            lines.append(f"({label},.,.) = ")
            lines.extend(rows(matrix))
            lines.append("")
    lines.append(f"[ {type_name}{{{','.join(map(str, shape))}}} ]")
    return "\n".join(lines)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Swap dimensions 1 and 2 of a tensor.")
    parser.add_argument("--shape", nargs=3, type=int, default=[2, 3, 4], metavar="N")
    args = parser.parse_args(argv)
    original = arange_tensor(args.shape)
    print("Original tensor:\n" + format_tensor(original) + "\n")
    print("\nAfter swapping dim 1 and 2:\n" + format_tensor(swap_last_two(original)) + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
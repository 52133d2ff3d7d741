"""Immutable 4x4 matrices."""

from __future__ import annotations

from numbers import Real
from typing import Iterable, Iterator, Optional, Tuple, Union

_Row = Tuple[float, float, float, float]


def _identity_rows() -> Tuple[_Row, ...]:
    return tuple(
        tuple(1.0 if r == c else 0.0 for c in range(4)) for r in range(4)
    )


class Mat4:
    """A 4x4 matrix of floats, stored row by row.

    Built from nothing (identity), from 16 values in row-major order,
    or from four rows of four values.
    """

    __slots__ = ("_rows",)

    def __init__(self, values: Optional[Iterable] = None) -> None:
        if values is None:
            self._rows = _identity_rows()
            return
        items = list(values)
        if len(items) == 16 and all(isinstance(v, Real) for v in items):
            self._rows = tuple(
                tuple(float(v) for v in items[r * 4:(r + 1) * 4]) for r in range(4)
            )
            return
        if len(items) == 4:
            rows = [tuple(float(v) for v in row) for row in items]
            if all(len(row) == 4 for row in rows):
                self._rows = tuple(rows)
                return
        raise ValueError("Mat4 needs 16 values or 4 rows of 4 values")

    @property
    def rows(self) -> Tuple[_Row, ...]:
        return self._rows

    def __getitem__(self, index: Union[int, Tuple[int, int]]):
        """m[r, c] gives one element; m[r] gives a row."""
        if isinstance(index, tuple):
            r, c = index
            return self._rows[r][c]
        return self._rows[index]

    def __iter__(self) -> Iterator[_Row]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat4):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __matmul__(self, other: "Mat4") -> "Mat4":
        if not isinstance(other, Mat4):
            return NotImplemented
        cols = list(zip(*other._rows))
        return Mat4(
            [[sum(a * b for a, b in zip(row, col)) for col in cols] for row in self._rows]
        )

    def transpose(self) -> "Mat4":
        return Mat4(list(zip(*self._rows)))

    def inverse(self) -> "Mat4":
        """Inverse by Gauss-Jordan elimination; the identity if singular."""
        t = [list(row) for row in self._rows]
        s = [list(row) for row in _identity_rows()]
        for i in range(4):
            pivot = max(range(i, 4), key=lambda j: abs(t[j][i]))
            if abs(t[pivot][i]) == 0.0:
                return Mat4()
            if pivot != i:
                t[i], t[pivot] = t[pivot], t[i]
                s[i], s[pivot] = s[pivot], s[i]
            pivot_val = t[i][i]
            t[i] = [v / pivot_val for v in t[i]]
            s[i] = [v / pivot_val for v in s[i]]
            for j in range(4):
                if j == i:
                    continue
                factor = t[j][i]
                t[j] = [a - factor * b for a, b in zip(t[j], t[i])]
                s[j] = [a - factor * b for a, b in zip(s[j], s[i])]
        return Mat4(s)

    def __str__(self) -> str:
        return "\n".join(" ".join(f"{v:f}" for v in row) for row in self._rows)

    def __repr__(self) -> str:
        return f"Mat4({[list(row) for row in self._rows]!r})"
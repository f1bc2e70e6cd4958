"""Row-major 3x3 and 4x4 matrices for 2D and 3D transforms."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Iterable, Sequence, Tuple, TypeVar

from .vectors import Vector3, Vector4

_M = TypeVar("_M", bound="_SquareMatrix")

Rows = Tuple[Tuple[float, ...], ...]


def _minor(rows: Sequence[Sequence[float]], row: int, col: int) -> list:
    return [
        [value for c, value in enumerate(r) if c != col]
        for i, r in enumerate(rows)
        if i != row
    ]


def _determinant(rows: Sequence[Sequence[float]]) -> float:
    if len(rows) == 1:
        return rows[0][0]
    if len(rows) == 2:
        return rows[0][0] * rows[1][1] - rows[0][1] * rows[1][0]
    return sum(
        (-1) ** col * value * _determinant(_minor(rows, 0, col))
        for col, value in enumerate(rows[0])
    )


@dataclass(frozen=True)
class _SquareMatrix:
    """A square matrix stored as a tuple of rows."""

    m: Rows
    SIZE: ClassVar[int] = 0

    def __post_init__(self) -> None:
        rows = tuple(tuple(float(v) for v in row) for row in self.m)
        if len(rows) != self.SIZE or any(len(r) != self.SIZE for r in rows):
            raise ValueError(
                f"{type(self).__name__} needs {self.SIZE}x{self.SIZE} values"
            )
        object.__setattr__(self, "m", rows)

    @classmethod
    def _from_function(cls: type[_M], fn) -> _M:
        return cls(tuple(tuple(fn(i, j) for j in range(cls.SIZE)) for i in range(cls.SIZE)))

    @classmethod
    def _from_flat(cls: type[_M], values: Iterable[float]) -> _M:
        flat = list(values)
        n = cls.SIZE
        return cls(tuple(tuple(flat[i * n:(i + 1) * n]) for i in range(n)))

    @classmethod
    def _diagonal(cls: type[_M], value: float) -> _M:
        return cls._from_function(lambda i, j: value if i == j else 0.0)

    @property
    def data(self) -> Tuple[float, ...]:
        """All elements, row by row."""
        return tuple(v for row in self.m for v in row)

    def __getitem__(self, index: int) -> Tuple[float, ...]:
        return self.m[index]

    def __matmul__(self: _M, other: _M) -> _M:
        if type(other) is not type(self):
            return NotImplemented
        n = self.SIZE
        return type(self)._from_function(
            lambda i, j: sum(self.m[i][k] * other.m[k][j] for k in range(n))
        )

    def _apply(self, values: Sequence[float]) -> list:
        return [sum(a * b for a, b in zip(row, values)) for row in self.m]

    def _inverse(self: _M) -> _M:
        n = self.SIZE
        cofactors = [
            [(-1) ** (i + j) * _determinant(_minor(self.m, i, j)) for j in range(n)]
            for i in range(n)
        ]
        det = sum(self.m[0][j] * cofactors[0][j] for j in range(n))
        if det == 0:
            return type(self)._diagonal(0.0)
        inv_det = 1.0 / det
        return type(self)._from_function(lambda i, j: cofactors[j][i] * inv_det)


@dataclass(frozen=True)
class Matrix4(_SquareMatrix):
    """A 4x4 matrix for 3D transforms."""

    SIZE: ClassVar[int] = 4

    @classmethod
    def scalar(cls, value: float) -> "Matrix4":
        """A matrix with ``value`` on the diagonal and zeros elsewhere."""
        return cls._diagonal(value)

    @classmethod
    def identity(cls) -> "Matrix4":
        return cls._diagonal(1.0)

    @classmethod
    def make_translation(cls, translation) -> "Matrix4":
        rows = [list(r) for r in cls.identity().m]
        rows[0][3] = translation.x
        rows[1][3] = translation.y
        rows[2][3] = translation.z
        return cls(rows)

    @classmethod
    def make_rotation(cls, axis, radians: float) -> "Matrix4":
        """Rotation by ``radians`` around ``axis`` (expected to be unit length)."""
        c = math.cos(radians)
        s = math.sin(radians)
        t = 1.0 - c
        x, y, z = axis.x, axis.y, axis.z
        return cls(
            (
                (c + x * x * t, x * y * t + z * s, x * z * t - y * s, 0.0),
                (y * x * t - z * s, c + y * y * t, y * z * t + x * s, 0.0),
                (z * x * t + y * s, z * y * t - x * s, c + z * z * t, 0.0),
                (0.0, 0.0, 0.0, 1.0),
            )
        )

    @classmethod
    def make_rotation_z(cls, radians: float) -> "Matrix4":
        return cls.make_rotation(Vector3(0, 0, 1), radians)

    @classmethod
    def make_scale(cls, scale) -> "Matrix4":
        rows = [list(r) for r in cls.identity().m]
        rows[0][0] = scale.x
        rows[1][1] = scale.y
        rows[2][2] = scale.z
        return cls(rows)

    @classmethod
    def make_orthographic_projection(
        cls,
        left: float,
        right: float,
        bottom: float,
        top: float,
        near: float,
        far: float,
    ) -> "Matrix4":
        rows = [list(r) for r in cls.identity().m]
        rows[0][0] = 2.0 / (right - left)
        rows[1][1] = 2.0 / (top - bottom)
        rows[2][2] = -2.0 / (far - near)
        rows[0][3] = -(right + left) / (right - left)
        rows[1][3] = -(top + bottom) / (top - bottom)
        rows[2][3] = -(far + near) / (far - near)
        return cls(rows)

    def translate(self, translation) -> "Matrix4":
        return self @ Matrix4.make_translation(translation)

    def rotate(self, axis, radians: float) -> "Matrix4":
        return self @ Matrix4.make_rotation(axis, radians)

    def rotate_z(self, radians: float) -> "Matrix4":
        return self @ Matrix4.make_rotation_z(radians)

    def scale(self, scale) -> "Matrix4":
        return self @ Matrix4.make_scale(scale)

    def transform(self, v: Vector4) -> Vector4:
        """Multiply the column vector ``v`` by this matrix."""
        return Vector4(*self._apply((v.x, v.y, v.z, v.w)))

    def inverse(self) -> "Matrix4":
        """The inverse matrix, or the zero matrix when it is singular."""
        return self._inverse()


@dataclass(frozen=True)
class Matrix3(_SquareMatrix):
    """A 3x3 matrix for 2D transforms."""

    SIZE: ClassVar[int] = 3

    @classmethod
    def scalar(cls, value: float) -> "Matrix3":
        """A matrix with ``value`` on the diagonal and zeros elsewhere."""
        return cls._diagonal(value)

    @classmethod
    def identity(cls) -> "Matrix3":
        return cls._diagonal(1.0)

    @classmethod
    def make_translation(cls, translation) -> "Matrix3":
        rows = [list(r) for r in cls.identity().m]
        rows[0][2] = translation.x
        rows[1][2] = translation.y
        return cls(rows)

    @classmethod
    def make_rotation(cls, radians: float) -> "Matrix3":
        c = math.cos(radians)
        s = math.sin(radians)
        return cls(((c, -s, 0.0), (s, c, 0.0), (0.0, 0.0, 1.0)))

    @classmethod
    def make_scale(cls, scale) -> "Matrix3":
        rows = [list(r) for r in cls.identity().m]
        rows[0][0] = scale.x
        rows[1][1] = scale.y
        return cls(rows)

    def translate(self, translation) -> "Matrix3":
        return self @ Matrix3.make_translation(translation)

    def rotate(self, radians: float) -> "Matrix3":
        return self @ Matrix3.make_rotation(radians)

    def scale(self, scale) -> "Matrix3":
        return self @ Matrix3.make_scale(scale)

    def transform(self, v: Vector3) -> Vector3:
        """Multiply the column vector ``v`` by this matrix."""
        return Vector3(*self._apply((v.x, v.y, v.z)))

    def inverse(self) -> "Matrix3":
        """The inverse matrix, or the zero matrix when it is singular."""
        return self._inverse()

    def to_matrix4(self) -> Matrix4:
        """Embed into an identity 4x4, leaving the z row and column untouched."""
        rows = [list(r) for r in Matrix4.identity().m]
        src_to_dst = (0, 1, 3)
        for si, di in enumerate(src_to_dst):
            for sj, dj in enumerate(src_to_dst):
                rows[di][dj] = self.m[si][sj]
        return Matrix4(rows)
"""Small fixed-size vectors for 2D, 3D and 4D math, in float and integer flavours."""

from __future__ import annotations

import math
from dataclasses import dataclass, fields
from typing import Iterator, Tuple, TypeVar, Union

_V = TypeVar("_V", bound="_BaseVector")


def _trunc_div(a: int, b: int) -> int:
    """Integer division that rounds toward zero."""
    if b == 0:
        raise ZeroDivisionError("integer vector division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


class _BaseVector:
    """Operations shared by every vector type."""

    def __iter__(self) -> Iterator:
        return (getattr(self, f.name) for f in fields(self))

    def __len__(self) -> int:
        return len(fields(self))

    def __getitem__(self, index: int):
        return tuple(self)[index]

    @property
    def data(self) -> Tuple:
        """The components as a tuple."""
        return tuple(self)

    @classmethod
    def _fill(cls: type[_V], a) -> _V:
        return cls(*([a] * len(fields(cls))))

    @classmethod
    def zero(cls: type[_V]) -> _V:
        return cls._fill(0)

    @classmethod
    def one(cls: type[_V]) -> _V:
        return cls._fill(1)

    def _zip(self, other) -> Iterator[Tuple]:
        if type(other) is not type(self):
            raise TypeError(
                f"expected {type(self).__name__}, got {type(other).__name__}"
            )
        return zip(self, other)

    def __add__(self: _V, other: _V) -> _V:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a + b for a, b in self._zip(other)))

    def __sub__(self: _V, other: _V) -> _V:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(*(a - b for a, b in self._zip(other)))

    def __mul__(self: _V, other) -> _V:
        if type(other) is type(self):
            return type(self)(*(a * b for a, b in zip(self, other)))
        if isinstance(other, (int, float)):
            return type(self)(*(a * other for a in self))
        return NotImplemented

    def __rmul__(self: _V, other) -> _V:
        if isinstance(other, (int, float)):
            return type(self)(*(a * other for a in self))
        return NotImplemented

    def __neg__(self: _V) -> _V:
        return type(self)(*(-a for a in self))

    def __abs__(self: _V) -> _V:
        return type(self)(*(abs(a) for a in self))

    def _length(self) -> float:
        return math.sqrt(sum(a * a for a in self))

    def _average(self) -> float:
        return sum(self) / float(len(self))


class _FloatVector(_BaseVector):
    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, float(getattr(self, f.name)))

    def __truediv__(self: _V, other) -> _V:
        if type(other) is type(self):
            return type(self)(*(a / b for a, b in zip(self, other)))
        if isinstance(other, (int, float)):
            return type(self)(*(a / other for a in self))
        return NotImplemented

    def _lerp(self: _V, other: _V, t: float) -> _V:
        return type(self)(*(a + (b - a) * t for a, b in self._zip(other)))

    def _normalize(self: _V) -> _V:
        length = self._length()
        if length == 0:
            return type(self)._fill(0)
        return self / length

    def _dot(self, other) -> float:
        return sum(a * b for a, b in self._zip(other))


class _IntVector(_BaseVector):
    def __post_init__(self) -> None:
        for f in fields(self):
            object.__setattr__(self, f.name, int(getattr(self, f.name)))

    def __truediv__(self: _V, other) -> _V:
        if type(other) is type(self):
            return type(self)(*(_trunc_div(a, b) for a, b in zip(self, other)))
        if isinstance(other, int):
            return type(self)(*(_trunc_div(a, other) for a in self))
        return NotImplemented

    __floordiv__ = __truediv__


@dataclass(frozen=True)
class Vector2(_FloatVector):
    x: float = 0.0
    y: float = 0.0

    @classmethod
    def scalar(cls, a) -> "Vector2":
        """A vector with every component set to ``a``."""
        return cls(a, a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def lerp(self, other: "Vector2", t: float) -> "Vector2":
        """Linear interpolation from ``self`` (t=0) to ``other`` (t=1)."""
        return self._lerp(other, t)

    def normalize(self) -> "Vector2":
        """Unit vector in the same direction, or the zero vector."""
        return self._normalize()

    def dot(self, other: "Vector2") -> float:
        """Dot product."""
        return self._dot(other)

    def cross(self, other: "Vector2") -> float:
        """The z component of the 3D cross product."""
        self._zip(other)
        return self.x * other.y - self.y * other.x

    def to_int(self) -> "Vector2i":
        """Convert, truncating toward zero."""
        return Vector2i(*self)


@dataclass(frozen=True)
class Vector3(_FloatVector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    r = property(lambda self: self.x)
    g = property(lambda self: self.y)
    b = property(lambda self: self.z)

    @property
    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    @property
    def yz(self) -> Vector2:
        return Vector2(self.y, self.z)

    @classmethod
    def scalar(cls, a) -> "Vector3":
        """A vector with every component set to ``a``."""
        return cls(a, a, a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def lerp(self, other: "Vector3", t: float) -> "Vector3":
        """Linear interpolation from ``self`` (t=0) to ``other`` (t=1)."""
        return self._lerp(other, t)

    def normalize(self) -> "Vector3":
        """Unit vector in the same direction, or the zero vector."""
        return self._normalize()

    def dot(self, other: "Vector3") -> float:
        """Dot product."""
        return self._dot(other)

    def cross(self, other: "Vector3") -> "Vector3":
        """Cross product."""
        self._zip(other)
        return Vector3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def to_int(self) -> "Vector3i":
        """Convert, truncating toward zero."""
        return Vector3i(*self)


@dataclass(frozen=True)
class Vector4(_FloatVector):
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0
    w: float = 0.0

    r = property(lambda self: self.x)
    g = property(lambda self: self.y)
    b = property(lambda self: self.z)
    a = property(lambda self: self.w)
    left = property(lambda self: self.x)
    bottom = property(lambda self: self.y)
    right = property(lambda self: self.z)
    top = property(lambda self: self.w)

    @property
    def xy(self) -> Vector2:
        return Vector2(self.x, self.y)

    @property
    def zw(self) -> Vector2:
        return Vector2(self.z, self.w)

    @property
    def xyz(self) -> Vector3:
        return Vector3(self.x, self.y, self.z)

    @property
    def yzw(self) -> Vector3:
        return Vector3(self.y, self.z, self.w)

    @classmethod
    def scalar(cls, a) -> "Vector4":
        """A vector with every component set to ``a``."""
        return cls(a, a, a, a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def lerp(self, other: "Vector4", t: float) -> "Vector4":
        """Linear interpolation from ``self`` (t=0) to ``other`` (t=1)."""
        return self._lerp(other, t)

    def normalize(self) -> "Vector4":
        """Unit vector in the same direction, or the zero vector."""
        return self._normalize()

    def dot(self, other: "Vector4") -> float:
        """Dot product."""
        return self._dot(other)

    def to_int(self) -> "Vector4i":
        """Convert, truncating toward zero."""
        return Vector4i(*self)


@dataclass(frozen=True)
class Vector2i(_IntVector):
    x: int = 0
    y: int = 0

    @classmethod
    def scalar(cls, a) -> "Vector2i":
        """A vector with every component set to ``a``."""
        return cls(a, a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def to_float(self) -> Vector2:
        return Vector2(*self)


@dataclass(frozen=True)
class Vector3i(_IntVector):
    x: int = 0
    y: int = 0
    z: int = 0

    @property
    def xy(self) -> Vector2i:
        return Vector2i(self.x, self.y)

    @property
    def yz(self) -> Vector2i:
        return Vector2i(self.y, self.z)

    @classmethod
    def scalar(cls, a) -> "Vector3i":
        """A vector with every component set to ``a``."""
        return cls(a, a, a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def to_float(self) -> Vector3:
        return Vector3(*self)


@dataclass(frozen=True)
class Vector4i(_IntVector):
    x: int = 0
    y: int = 0
    z: int = 0
    w: int = 0

    @property
    def xy(self) -> Vector2i:
        return Vector2i(self.x, self.y)

    @property
    def zw(self) -> Vector2i:
        return Vector2i(self.z, self.w)

    @property
    def xyz(self) -> Vector3i:
        return Vector3i(self.x, self.y, self.z)

    @classmethod
    def scalar(cls, a) -> "Vector4i":
        """A vector with every component set to ``a``."""
        return cls(a, a, a, a)

    def length(self) -> float:
        """Euclidean length."""
        return self._length()

    def average(self) -> float:
        """Mean of the components."""
        return self._average()

    def to_float(self) -> Vector4:
        return Vector4(*self)


Number = Union[int, float]


def rotate_point_around_pivot(
    point: Vector2, pivot: Vector2, rotation_radians: float
) -> Vector2:
    """Rotate ``point`` counter-clockwise around ``pivot``."""
    s = math.sin(rotation_radians)
    c = math.cos(rotation_radians)
    p = point - pivot
    rotated = Vector2(p.x * c - p.y * s, p.x * s + p.y * c)
    return rotated + pivot
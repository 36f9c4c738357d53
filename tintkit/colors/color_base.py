from __future__ import annotations
from abc import ABC, abstractmethod
from collections.abc import Sized
from typing import Callable, ClassVar, Iterator, Optional, Sequence, Tuple, Union

import numpy as np

from ..consts import DEFAULT_APPROX_EQ_PRECISION, RATIO_MAX
from ..normalizers import normalize_opt_ratio, normalize_ratio
from ..parsing import tuple_to_string
from ..types.color_types import ColorSpace, ColorTuple, ColorTupleA, OptAlpha, Scalar
from ..utils.approx import approx, approx_def, approx_hue

ColorInput = Union[Sequence[Scalar], np.ndarray, "ColorBase"]


def _opaque_as_none(alpha: OptAlpha) -> OptAlpha:
    """Normalize a constructor alpha; an explicit fully-opaque one is stored as "no alpha"."""
    a = normalize_opt_ratio(alpha)
    if a is not None and approx_def(a, RATIO_MAX):
        return None
    return a


class ApproxEq(ABC):
    """Tolerance-based comparison between colors."""

    @abstractmethod
    def approx_eq(self, other: "ColorBase", precision: float = DEFAULT_APPROX_EQ_PRECISION) -> bool:
        raise NotImplementedError()


class WithAlpha(ABC):
    """
    Mixin for a color holding an optional alpha channel.

    A missing alpha reads as fully opaque (1.0) but is kept as ``None`` so a
    color built without alpha serializes without one.
    """

    _alpha: OptAlpha

    @property
    def has_alpha(self) -> bool:
        return self._alpha is not None

    @property
    def alpha(self) -> float:
        return self.get_alpha()

    @alpha.setter
    def alpha(self, val: float) -> None:
        self.set_alpha(val)

    def get_alpha(self) -> float:
        return RATIO_MAX if self._alpha is None else self._alpha

    def set_alpha(self, val: float) -> None:
        self._alpha = normalize_ratio(val)

    def opacify(self, val: float) -> None:
        """Add ``val`` to alpha, clamped to [0, 1]."""
        self.set_alpha(self.get_alpha() + val)


class ColorBase(WithAlpha, ApproxEq):
    """
    Three normalized channels plus an optional alpha.

    Every write, whether at construction or through a setter, goes through the
    class's per-channel normalizers, so an instance never holds an
    out-of-domain value.
    """

    __slots__ = ('_value', '_alpha')

    num_channels: ClassVar[int] = 3
    mode:         ClassVar[ColorSpace]
    null_value:   ClassVar[ColorTuple] = (0.0, 0.0, 0.0)
    normalizers:  ClassVar[Tuple[Callable[[float], float], ...]]
    css_prefix:   ClassVar[str]
    # Index of a circular hue channel, compared around the circle in approx_eq
    hue_index:    ClassVar[Optional[int]] = None
    # Parses a string into (tuple, alpha); set by each subclass
    parser:       ClassVar[Callable[..., Tuple[ColorTuple, OptAlpha]]]

    # Attached in colors/color.py
    convert: Callable[[ColorBase, Union[ColorSpace, str, None]], ColorBase]

    def __init__(self, value: Optional[ColorInput] = None, alpha: OptAlpha = None) -> None:
        if value is None:
            value = self.null_value

        # ---- Handle ColorBase input ----
        if isinstance(value, ColorBase):
            converted = value.convert(self.mode)
            self._value = converted._value
            self._alpha = converted._alpha if alpha is None else _opaque_as_none(alpha)
            return

        if isinstance(value, (str, bytes)) or not isinstance(value, (Sized, np.ndarray)):
            raise TypeError(
                f"{self.__class__.__name__} expects a {self.num_channels}- or "
                f"{self.num_channels + 1}-channel tuple, got {type(value).__name__}"
            )

        values = tuple(float(v) for v in value)
        if len(values) == self.num_channels + 1:
            if alpha is not None:
                raise ValueError(f"{self.__class__.__name__} got alpha both in the tuple and as an argument")
            values, alpha = values[:-1], values[-1]
        elif len(values) != self.num_channels:
            raise ValueError(
                f"{self.mode.value} expects {self.num_channels} channels (plus optional alpha), got {len(values)}"
            )

        self._value = self._normalize(values)
        self._alpha = _opaque_as_none(alpha)

    @classmethod
    def _normalize(cls, values: Sequence[float]) -> ColorTuple:
        return tuple(norm(v) for norm, v in zip(cls.normalizers, values))  # type: ignore[return-value]

    @classmethod
    def _build(cls, value: Sequence[float], alpha: OptAlpha = None):
        """Create an instance from channel values, keeping alpha exactly as given."""
        obj = cls.__new__(cls)
        obj._value = cls._normalize(value)
        obj._alpha = normalize_opt_ratio(alpha)
        return obj

    # ------------------ NAMED CONSTRUCTORS ------------------
    @classmethod
    def from_tuple(cls, t: ColorTuple):
        return cls(t)

    @classmethod
    def from_tuple_with_alpha(cls, t: ColorTupleA):
        return cls(t[:3], t[3])

    @classmethod
    def from_color(cls, color: "ColorBase"):
        """Cross-space constructor: convert ``color`` into this class's space."""
        return cls(color)

    @classmethod
    def from_str(cls, s: str):
        """
        Parse a CSS-style color string.

        Raises:
            ParseError: if ``s`` is malformed
        """
        t, alpha = cls.parser(s, stacklevel=3)
        color = cls(t)
        if alpha is not None:
            color.set_alpha(alpha)
        return color

    # ------------------ EXTRACTORS ------------------
    def to_tuple(self) -> ColorTuple:
        return self._value

    def to_tuple_with_alpha(self) -> ColorTupleA:
        return self._value + (self.get_alpha(),)  # type: ignore[return-value]

    def to_css_string(self) -> str:
        t = self.to_tuple_with_alpha() if self.has_alpha else self.to_tuple()
        return tuple_to_string(t, self.css_prefix)

    def copy(self):
        return self.__class__._build(self._value, self._alpha)

    # ------------------ CHANNEL ACCESS ------------------
    def _get_channel(self, index: int) -> float:
        return self._value[index]

    def _set_channel(self, index: int, val: float) -> None:
        values = list(self._value)
        values[index] = self.normalizers[index](val)
        self._value = tuple(values)  # type: ignore[assignment]

    def _apply_tuple(self, t: Sequence[float]) -> None:
        self._value = self._normalize(t)

    def __iter__(self) -> Iterator[float]:
        """Yield channels in canonical order, then alpha if one is set."""
        yield from self._value
        if self._alpha is not None:
            yield self._alpha

    # ------------------ COMPARISON ------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ColorBase) or other.mode != self.mode:
            return NotImplemented
        return self._value == other._value and self._alpha == other._alpha

    __hash__ = None  # type: ignore[assignment]

    def approx_eq(self, other: "ColorBase", precision: float = DEFAULT_APPROX_EQ_PRECISION) -> bool:
        """
        Compare channels and alpha within ``precision``.

        A color from another space is converted into this color's space first.
        A hue channel is compared by circular distance, so 359.9999999 and 0
        are close.
        """
        if not isinstance(other, ColorBase):
            raise TypeError(f"{other!r} is not a color")
        if other.mode != self.mode:
            other = other.convert(self.mode)
        for i, (a, b) in enumerate(zip(self._value, other._value)):
            close = approx_hue(a, b, precision) if i == self.hue_index else approx(a, b, precision)
            if not close:
                return False
        return approx(self.get_alpha(), other.get_alpha(), precision)

    def __repr__(self) -> str:
        if self._alpha is None:
            return f"{self.__class__.__name__}({self._value!r})"
        return f"{self.__class__.__name__}({self._value!r}, alpha={self._alpha!r})"


def channel_property(index: int, doc: str) -> property:
    """Read/write property over one channel; writes are normalized."""

    def getter(self: ColorBase) -> float:
        return self._get_channel(index)

    def setter(self: ColorBase, val: float) -> None:
        self._set_channel(index, val)

    return property(getter, setter, doc=doc)

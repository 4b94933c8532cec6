# -*- encoding: utf-8 -*-
# @File   : codec.py
# @Time   : 2026/10/13 00:12:45

"""Text codecs for typed INI values.

Every value is stored as text. A `ValueCodec` tells how a python type
is rendered to that text and parsed back. Custom types can be plugged:

    ```python
    register_codec(ValueCodec(
        Fraction, render=str, parse=Fraction, zero=Fraction(0)))
    ```
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from pathlib import Path, PurePath
from typing import Any, Callable

__all__ = [
    'ConversionError', 'ValueCodec',
    'register_codec', 'codec_for', 'render', 'parse'
]

TRUE_WORDS = ('1', 'true', 'yes', 'on')
FALSE_WORDS = ('0', 'false', 'no', 'off')


class ConversionError(ValueError):
    """A value can't be rendered to, or parsed from, INI text."""

    def __init__(self, message: str, type_: type, text: str | None = None):
        super().__init__(message)
        self.type = type_
        self.text = text


@dataclass(frozen=True, kw_only=True)
class ValueCodec:
    type: type
    render: Callable[[Any], str]
    parse: Callable[[str], Any]
    # what a failed, non-strict parse degrades to.
    zero: Any = None


def _parse_bool(text: str) -> bool:
    word = text.strip().lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    raise ValueError(f'not a boolean: {text!r}')


def _parse_decimal(text: str) -> Decimal:
    try:
        return Decimal(text.strip())
    except InvalidOperation as e:
        raise ValueError(f'not a decimal: {text!r}') from e


_REGISTRY: dict[type, ValueCodec] = {}


def register_codec(codec: ValueCodec) -> None:
    """Register (or replace) the codec used for `codec.type`
    and its subclasses without a closer codec."""
    _REGISTRY[codec.type] = codec


def codec_for(type_: type) -> ValueCodec:
    # walk the MRO, so `IntEnum` falls back to `int`, etc.
    for base in getattr(type_, '__mro__', (type_,)):
        if base in _REGISTRY:
            return _REGISTRY[base]
    raise ConversionError(
        f'No text codec registered for {type_.__name__}.', type_)


def render(value: Any, codec: ValueCodec | None = None) -> str:
    codec = codec or codec_for(type(value))
    try:
        return codec.render(value)
    except (TypeError, ValueError) as e:
        raise ConversionError(
            f'Unable to render {value!r} as {codec.type.__name__} text.',
            codec.type) from e


def parse(text: str, codec: ValueCodec) -> Any:
    try:
        return codec.parse(text)
    except (TypeError, ValueError, ArithmeticError) as e:
        raise ConversionError(
            f'Unable to parse {text!r} as {codec.type.__name__}.',
            codec.type, text) from e


for _codec in (
    ValueCodec(type=str, render=str, parse=str, zero=''),
    ValueCodec(type=int, render=str, parse=int, zero=0),
    ValueCodec(type=float, render=repr, parse=float, zero=0.0),
    # bool is an int subclass, registered explicitly to not render 'True'.
    ValueCodec(type=bool, render=lambda v: '1' if v else '0',
               parse=_parse_bool, zero=False),
    ValueCodec(type=Decimal, render=str, parse=_parse_decimal,
               zero=Decimal(0)),
    ValueCodec(type=PurePath, render=str, parse=Path, zero=Path()),
):
    register_codec(_codec)

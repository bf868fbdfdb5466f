# -*- encoding: utf-8 -*-
# @File   : decode.py
# @Time   : 2024/10/14 21:30:47
# @Author : Kariko Lin

from typing import TypeVar
from warnings import warn

from ..cfg.errors import CfgError, ShapeError
from ..cfg.model import Config
from ..cfg.parser import decode_bytes, parse
from .fields import BoundField, bound_fields, check_shape

T = TypeVar('T')


def _candidates(config: Config, bound: BoundField) -> list[str]:
    """Keys matching `bound`, best first.

    The explicit tag beats the exact field name,
    which beats the field name in any case.
    Keys of a same rank keep their document order.
    """
    tagged: list[str] = []
    exact: list[str] = []
    folded: list[str] = []
    name = bound.name.casefold()
    for key in config:
        if bound.tag is not None and key == bound.tag:
            tagged.append(key)
        elif key == bound.name:
            exact.append(key)
        elif key.casefold() == name:
            folded.append(key)
    return tagged + exact + folded


def unmarshal_from_config(config: Config, obj: T) -> T:
    """Fill dataclass instance `obj` with values of `config`, and return it.

    A field is matched to a key by its `cfg` tag or by its name,
    case-insensitive (see `_candidates()` for who wins).
    If the value can not be read as the field type,
    e.g. `Answer: int` and `Answer = hello`,
    the field simply keeps what it had.

    Raises:
        ShapeError: `obj` is not a dataclass instance, or it is frozen.
    """
    check_shape(obj)
    if type(obj).__dataclass_params__.frozen:
        raise ShapeError(
            f'cfg: can not unmarshal into frozen {type(obj).__name__}')

    for i in bound_fields(obj):
        keys = _candidates(config, i)
        if not keys:
            continue
        if len(keys) > 1:
            warn(f'cfg: keys {keys} all match field "{i.name}", '
                 f'"{keys[0]}" is used.')
        try:
            value = config.get_as(keys[0], i.codec.pytype)
        except CfgError:
            continue
        setattr(obj, i.name, value)
    return obj


def unmarshal(data: bytes | str, obj: T) -> T:
    """Parse `data` and `unmarshal_from_config()` it.

    Bytes are read as utf-8. Other encodings are guessed by `chardet`
    the same way `CfgParser.read()` does, and latin-1 takes what is left,
    so bytes never fail to decode.

    Raises:
        ShapeError: see `unmarshal_from_config()`.
    """
    check_shape(obj)
    if isinstance(data, (bytes, bytearray)):
        try:
            data = bytes(data).decode('utf-8')
        except UnicodeDecodeError:
            data = decode_bytes(bytes(data))
    return unmarshal_from_config(parse(data), obj)

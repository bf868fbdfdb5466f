# -*- encoding: utf-8 -*-
# @File   : encode.py
# @Time   : 2024/10/14 20:12:55
# @Author : Kariko Lin

from ..cfg.consts import DELIMITER
from ..cfg.errors import InvalidValue
from ..cfg.model import Config, check_key
from ..cfg.parser import parse
from .fields import bound_fields


def _encode_lines(obj: object) -> list[str]:
    ret = []
    for i in bound_fields(obj):
        check_key(i.key)
        value = getattr(obj, i.name)
        try:
            text = i.codec.format(value)
        except (TypeError, ValueError) as e:
            # annotations are not enforced, `Answer: int = None` is possible.
            raise InvalidValue(i.key, i.codec.kind, repr(value)) from e
        ret.append(f'{i.key} {DELIMITER} {text}')
    return ret


def marshal(obj: object) -> bytes:
    """Encode dataclass instance `obj`, one `key = value\\n` line per field.

    Only top level `int`, `float`, `bool` and `str` fields are written,
    in declaration order. No recursion into nested dataclasses.

    Raises:
        ShapeError: `obj` is not a dataclass instance.
        InvalidKey: a tag can not be written as a key, e.g. contains `=`.
        InvalidValue: a field holds something its annotation disagrees with.
    """
    return ''.join(f'{i}\n' for i in _encode_lines(obj)).encode('utf-8')


def marshal_to_config(obj: object) -> Config:
    """Same as `marshal()`, but gives a `Config` ready for further edits."""
    # parsed rather than built with `set_*()`,
    # so that two fields sharing one key end up as two lines, just like text.
    return parse(marshal(obj).decode('utf-8'))

# -*- encoding: utf-8 -*-
# @File   : fields.py
# @Time   : 2024/10/14 19:40:08
# @Author : Kariko Lin

"""Which dataclass fields take part in marshal/unmarshal, and as what key.

```python
@dataclass
class MyConfig:
    Answer: int = 0                                 # key "Answer"
    IsActive: bool = cfg_field('is_active', default=False)
    NotUsed: str = cfg_field('-', default='')       # skipped
    _cache: dict = field(default_factory=dict)      # private, skipped
    extra: list = field(default_factory=list)       # unsupported, skipped
```
"""

import logging
from dataclasses import dataclass, field, fields, is_dataclass
from typing import Any, get_type_hints

from ..cfg.codec import ValueCodec, codec_for
from ..cfg.consts import SKIP_TAG, TAG_KEY
from ..cfg.errors import ShapeError

# for `from __future__ import annotations` and failed `get_type_hints()`.
_BUILTIN_NAMES = {'int': int, 'float': float, 'bool': bool, 'str': str}


@dataclass(frozen=True)
class BoundField:
    name: str
    # explicit key, `None` when the field goes by its own name.
    tag: str | None
    codec: ValueCodec

    @property
    def key(self) -> str:
        """The key to write when marshaling."""
        return self.name if self.tag is None else self.tag


def cfg_field(key: str, **kwargs: Any) -> Any:
    """`dataclasses.field()` with the config key (or `'-'`) attached."""
    metadata = dict(kwargs.pop('metadata', None) or {})
    metadata[TAG_KEY] = key
    return field(metadata=metadata, **kwargs)


def check_shape(obj: object) -> None:
    if not is_dataclass(obj) or isinstance(obj, type):
        raise ShapeError(
            'cfg: target must be a dataclass instance, '
            f'got {type(obj).__name__}')


def _resolve_types(cls: type) -> dict[str, Any]:
    try:
        return get_type_hints(cls)
    except NameError as e:
        # one unresolvable annotation should not hide the others.
        logging.debug(f'cfg: type hints of {cls.__name__} incomplete: {e}')
        return {}


def bound_fields(obj: object) -> list[BoundField]:
    """Fields of dataclass instance `obj` to bind, in declaration order."""
    check_shape(obj)
    hints = _resolve_types(type(obj))
    ret = []
    for f in fields(obj):
        if f.name.startswith('_'):
            continue
        tag = f.metadata.get(TAG_KEY) or None
        if tag == SKIP_TAG:
            continue
        pytype = hints.get(f.name, f.type)
        if isinstance(pytype, str):
            pytype = _BUILTIN_NAMES.get(pytype)
        if (vcodec := codec_for(pytype)) is None:
            logging.debug(
                f'cfg: {type(obj).__name__}.{f.name} of type {f.type!r} '
                'is not int, float, bool or str. skipped.')
            continue
        ret.append(BoundField(f.name, tag, vcodec))
    return ret

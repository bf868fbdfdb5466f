# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 20:55:03
# @Author : Kariko Lin

"""Flat `key = value` configuration, readable and writeable
by both humans and programs.

```
# This is a comment

# An integer value
answer = 42

# A float value
pi = 3.14

# A boolean value
is_active = true

# A string value
quotes = Alea iacta est\\nEt tu, Brute?
```

Integers are decimal, floats are written without exponent,
booleans are `true`/`false`, strings have new lines escaped as `\\n`.
Comments can be read by programs, but only humans edit them.
"""

import logging

from .cfg import (
    TAG_KEY, SKIP_TAG, ValueKind,
    CfgError, KeyNotFound, InvalidKey, InvalidValue, ShapeError,
    Config, CfgParser, ConfigFile, parse
)
from .binding import (
    cfg_field,
    marshal, marshal_to_config,
    unmarshal, unmarshal_from_config
)

__all__ = [
    'TAG_KEY', 'SKIP_TAG', 'ValueKind',
    'CfgError', 'KeyNotFound', 'InvalidKey', 'InvalidValue', 'ShapeError',
    'Config', 'CfgParser', 'ConfigFile', 'parse',
    'cfg_field',
    'marshal', 'marshal_to_config',
    'unmarshal', 'unmarshal_from_config'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2024/10/12 21:03:41
# @Author : Kariko Lin

from enum import Enum

# dataclass field metadata key, e.g. `field(metadata={TAG_KEY: 'is_active'})`
TAG_KEY = 'cfg'
SKIP_TAG = '-'

COMMENT_MARK = '#'
DELIMITER = '='
# the only escape sequence of the format.
ESCAPED_NEWLINE = '\\n'


class ValueKind(str, Enum):
    INT = 'integer'
    FLOAT = 'float'
    BOOL = 'boolean'
    STRING = 'string'

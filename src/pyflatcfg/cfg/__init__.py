# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2024/10/12 21:01:26
# @Author : Kariko Lin

from .consts import TAG_KEY, SKIP_TAG, ValueKind
from .errors import (
    CfgError,
    KeyNotFound,
    InvalidKey,
    InvalidValue,
    ShapeError
)
from .model import Config
from .parser import CfgParser, parse
from .file import ConfigFile

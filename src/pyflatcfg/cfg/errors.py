# -*- encoding: utf-8 -*-
# @File   : errors.py
# @Time   : 2024/10/12 21:10:05
# @Author : Kariko Lin

"""Errors raised by `pyflatcfg`.

File system failures are NOT wrapped, the `OSError` raised by `open()`
and friends reaches the caller as is.
"""

from .consts import ValueKind


class CfgError(Exception):
    """Base class of all `pyflatcfg` errors."""
    pass


class KeyNotFound(CfgError, KeyError):
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f'No such key ({self.key})'


class InvalidValue(CfgError, ValueError):
    """The value exists, but can not be read as the requested type."""
    def __init__(self, key: str, kind: ValueKind, value: str) -> None:
        super().__init__(key, kind, value)
        self.key = key
        self.kind = kind
        self.value = value

    def __str__(self) -> str:
        ret = f'Invalid {self.kind.value} for key "{self.key}": {self.value!r}'
        if self.__cause__ is not None:
            ret += f' ({self.__cause__})'
        return ret


class ShapeError(CfgError, TypeError):
    """Marshal or unmarshal target is not a dataclass instance."""
    pass


class InvalidKey(CfgError, ValueError):
    """Key would not survive a save and reload, e.g. it contains `=`."""
    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f'Key {self.key!r} can not be written as a line'

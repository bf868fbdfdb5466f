# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2024/10/12 23:02:17
# @Author : Kariko Lin

"""
Flat `key = value` configuration, with comments.

Here we keep two lists and a dict:
the raw lines (what gets saved), the comments (read only),
and a key -> value lookup (what gets read).
"""

import logging
from collections.abc import MutableMapping
from re import Match
from re import compile as regex
from typing import Any, Iterator, TypeVar

from . import codec

T = TypeVar('T')
from .codec import ValueCodec
from .consts import COMMENT_MARK, DELIMITER
from .errors import InvalidKey, InvalidValue, KeyNotFound

# key stops at the FIRST `=`, the rest of the line is the value.
# `head` keeps the original spacing around the key and delimiter,
# `tail` keeps trailing spaces, so that only `value` gets replaced.
_PAIR = regex(
    r'(?P<head>\s*(?P<key>[^=]*?)\s*=\s*)(?P<value>.*?)(?P<tail>\s*)')


def match_pair(line: str) -> Match[str] | None:
    """Match a key-value line, or `None` for comments and inert lines."""
    stripped = line.strip()
    if stripped.startswith(COMMENT_MARK) or DELIMITER not in stripped:
        return None
    return _PAIR.fullmatch(line)


def check_key(key: str) -> None:
    """Raise `InvalidKey` if `key = ...` would not read back as `key`."""
    if (
        not key
        or key != key.strip()
        or key.startswith(COMMENT_MARK)
        or DELIMITER in key
        or '\n' in key
        or '\r' in key
    ):
        raise InvalidKey(key)


class Config(MutableMapping[str, str]):
    """配置文档。支持以下形式的行（每行一条）：

        ```
        # 注释，只读。可以有多个`#`，前后空白会被去掉。
        answer = 42
        pi=3.14
        quotes = a\\nb
        ```

    `=`两侧空白随意，修改值时保持原样；字符串中的换行转义成`\\n`。
    值里再出现的`=`不作处理，以第一个`=`为准。
    其他行（空行、没有`=`的行）原样保留，但不产生任何数据。

    注：`self[key]`等价于`get_string()`/`set_string()`，
    但`del self[key]`在键不存在时会抛出`KeyNotFound`，`unset()`则不会。
    """
    def __init__(self) -> None:
        self.__raw: list[str] = []
        self.__comments: list[str] = []
        self.__values: dict[str, str] = {}

    @property
    def lines(self) -> tuple[str, ...]:
        """Raw lines, in the order they are going to be saved."""
        return tuple(self.__raw)

    @property
    def comments(self) -> tuple[str, ...]:
        """Comments found when parsing, in source order.

        There is no API to add, edit or delete them.
        """
        return tuple(self.__comments)

    def _feed(self, line: str) -> None:
        """for CfgParser.readstream(). `line` comes without line ending."""
        self.__raw.append(line)
        stripped = line.strip()
        if stripped.startswith(COMMENT_MARK):
            self.__comments.append(stripped.lstrip(COMMENT_MARK).strip())
        elif (m := match_pair(line)) is not None:
            key = m['key']
            if key in self.__values:
                logging.debug(
                    f'Duplicated key "{key}", '
                    f'"{self.__values[key]}" overridden by "{m["value"]}".')
            self.__values[key] = m['value']

    # getters

    def __get(self, key: str, vcodec: ValueCodec) -> Any:
        try:
            raw = self.__values[key]
        except KeyError:
            raise KeyNotFound(key) from None
        try:
            return vcodec.parse(raw)
        except ValueError as e:
            raise InvalidValue(key, vcodec.kind, raw) from e

    def get_string(self, key: str) -> str:
        """Value of `key`, with `\\n` unescaped into real new lines."""
        return self.__get(key, codec.STRING)

    def get_int(self, key: str) -> int:
        return self.__get(key, codec.INT)

    def get_float(self, key: str) -> float:
        return self.__get(key, codec.FLOAT)

    def get_bool(self, key: str) -> bool:
        """Accepts `1 t T true True TRUE` and `0 f F false False FALSE`."""
        return self.__get(key, codec.BOOL)

    def get_as(self, key: str, pytype: type[T]) -> T:
        """Typed read by the Python type, one of `int float bool str`."""
        vcodec = codec.codec_for(pytype)
        if vcodec is None:
            raise TypeError(f'Unsupported value type: {pytype!r}')
        return self.__get(key, vcodec)

    # setters

    def __set(self, key: str, value: str) -> None:
        if key not in self.__values:
            check_key(key)
            self.__raw.append(f'{key} {DELIMITER} {value}')
        else:
            # every line of a duplicated key gets updated.
            for idx, line in enumerate(self.__raw):
                m = match_pair(line)
                if m is None or m['key'] != key:
                    continue
                head = m['head']
                if not m['value'] and head.endswith(DELIMITER):
                    head += ' '
                self.__raw[idx] = f'{head}{value}{m["tail"]}'
        self.__values[key] = value

    def set_string(self, key: str, value: str) -> None:
        """New lines in `value` are escaped, to keep it in one line."""
        self.__set(key, codec.escape_string(value))

    def set_int(self, key: str, value: int) -> None:
        self.__set(key, codec.format_int(value))

    def set_float(self, key: str, value: float) -> None:
        """Written without exponent, e.g. `3.14` but not `3.14E+00`."""
        self.__set(key, codec.format_float(value))

    def set_bool(self, key: str, value: bool) -> None:
        self.__set(key, codec.format_bool(value))

    def unset(self, key: str) -> None:
        """Remove `key`, and the first line defining it.

        Comments are kept. Nothing happens if `key` does not exist.
        """
        if key not in self.__values:
            return
        for idx, line in enumerate(self.__raw):
            m = match_pair(line)
            if m is not None and m['key'] == key:
                del self.__raw[idx]
                break
        del self.__values[key]

    # mapping protocol

    def __getitem__(self, key: str) -> str:
        return self.get_string(key)

    def __setitem__(self, key: str, value: str) -> None:
        self.set_string(key, value)

    def __delitem__(self, key: str) -> None:
        if key not in self.__values:
            raise KeyNotFound(key)
        self.unset(key)

    def __contains__(self, key: object) -> bool:
        return key in self.__values

    def __iter__(self) -> Iterator[str]:
        return iter(self.__values)

    def __len__(self) -> int:
        return len(self.__values)

    def __str__(self) -> str:
        return '\n'.join(self.__raw)

    def __repr__(self) -> str:
        return '<Config { .lines = %d, .keys = %d, .comments = %d }>' % (
            len(self.__raw), len(self.__values), len(self.__comments))

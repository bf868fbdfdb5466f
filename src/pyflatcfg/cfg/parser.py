# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2024/10/13 00:21:36
# @Author : Kariko Lin

"""Read and write `Config` from text streams and files.

Parsing never fails because of the content: lines we do not understand
are kept as is, and just contribute nothing.
The only way to fail is the stream itself (`OSError`).
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from .model import Config
from ..abstract import FileHandler


def _strip_eol(line: str) -> str:
    if line.endswith('\n'):
        line = line[:-1]
    if line.endswith('\r'):
        line = line[:-1]
    return line


def decode_bytes(raw: bytes, source: str = '<bytes>') -> str:
    """Decode `raw` by what `chardet` guesses, latin-1 if that fails.

    `source` only names the data in log messages.
    """
    codec = chardet.detect(raw)
    if codec is None or (codec['confidence'] or 0) < 0.8:
        codec = {'encoding': 'utf-8'}
    encoding = codec['encoding'] or 'utf-8'
    logging.debug(f'Decoding "{source}" as {encoding}.')

    # fallbacks, latin-1 decodes whatever bytes.
    try:
        return raw.decode(encoding)
    except (UnicodeDecodeError, LookupError):
        logging.warning(
            f'"{source}" is not {encoding}, read as latin-1 instead.')
        return raw.decode('latin-1')


class CfgParser(FileHandler[Config]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str | None = None
    ) -> None:
        super().__init__(filename)
        self._codec = encoding

    @property
    def encoding(self) -> str | None:
        return self._codec

    @staticmethod
    def readstream(buf: TextIOBase, ins: Config | None = None) -> Config:
        """读取解码好的字符串流。

        传入`ins`时，新读到的行追加到`ins`末尾，同名键以后读到的为准。
        如没有特殊需求，直接调用`self.read()`便是。
        """
        if ins is None:
            ins = Config()
        # a trailing new line at EOF makes no empty line.
        while i := buf.readline():
            ins._feed(_strip_eol(i))
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()
        return StringIO(decode_bytes(raw, filename))

    def read(self, ins: Config | None = None) -> Config:
        """读取`CfgParser`实例指定的文件。

        传入`ins`时读入`ins`（比如`ConfigFile`自己），否则新建一个`Config`。
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            # read all first, so that `ins` never gets half a file.
            # no new line translation: a `\r` inside a value is not a line end.
            with open(self._fn, 'r', encoding=self._codec, newline='') as fp:
                buf = StringIO(fp.read())
        except UnicodeDecodeError:
            buf = self._decode_file(self._fn)
        return self.readstream(buf, ins)

    def write(self, instance: Config) -> None:
        """覆盖写入。行尾不额外补换行。"""
        with open(self._fn, 'w', encoding=self._codec, newline='') as fp:
            fp.write(str(instance))

    def __str__(self) -> str:
        return "Config file: " + super().__str__() + f"({self._codec})"


def parse(text: str) -> Config:
    """Parse `text` into a new `Config`."""
    return CfgParser.readstream(StringIO(text))

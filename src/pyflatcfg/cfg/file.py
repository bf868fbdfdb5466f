# -*- encoding: utf-8 -*-
# @File   : file.py
# @Time   : 2024/10/13 01:05:12
# @Author : Kariko Lin

from os import PathLike

from .model import Config
from .parser import CfgParser


class ConfigFile(Config):
    """A `Config` that remembers where it comes from.

    ```python
    conf = ConfigFile.load('app.cfg')
    conf.set_int('answer', 314)
    conf.persist()
    ```

    `OSError` from opening, reading or writing the file is not caught.
    """
    def __init__(
        self, path: str | PathLike[str], encoding: str | None = None
    ) -> None:
        """Init an empty config bound to `path`. Nothing is read."""
        super().__init__()
        self.__handler = CfgParser(path, encoding)

    @classmethod
    def load(
        cls, path: str | PathLike[str], encoding: str | None = None
    ) -> 'ConfigFile':
        ret = cls(path, encoding)
        ret.__handler.read(ret)
        return ret

    @property
    def path(self) -> str:
        return self.__handler.filename

    def persist(self) -> None:
        """Save everything (comments included) back to `self.path`."""
        self.__handler.write(self)

    def __repr__(self) -> str:
        return f'<ConfigFile "{self.path}" ' + super().__repr__()[8:]

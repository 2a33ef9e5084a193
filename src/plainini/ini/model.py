# -*- encoding: utf-8 -*-
# @File   : model.py
# @Time   : 2026/10/18 16:20:05
# @Author : Kariko Lin

"""
Basically INI Structure: ordered sections of ordered `str: str` pairs.

Comments are not kept, and there is no inheritance, `+=` or `[#include]`.
Reading and saving files, see `ini.parser`.
"""

from collections.abc import Mapping, MutableMapping
from io import StringIO, TextIOBase
from os import PathLike
from typing import Iterator

from .consts import PAIRING, SECTION_CLOSE, SECTION_OPEN


class IniError(Exception):
    """Base of every error raised by this package."""
    pass


class SectionNotFound(IniError, KeyError):
    def __init__(self, section: str) -> None:
        super().__init__(section)
        self.section = section

    def __str__(self) -> str:
        return f'section "{self.section}" does not exist'


class KeyNotFound(IniError, KeyError):
    def __init__(self, section: str, key: str) -> None:
        super().__init__(section, key)
        self.section = section
        self.key = key

    def __str__(self) -> str:
        return f'key "{self.key}" does not exist in section "{self.section}"'


class IniSection(MutableMapping[str, str]):
    """INI 小节字典。

    按插入顺序维护一个小节的全部键值对；重复赋值只覆盖旧值，位置不变。
    键和值都必须是`str`（哪怕是空串），否则抛出`TypeError`。
    """

    def __init__(
        self, section_name: str, /,
        pairs: Mapping[str, str] | None = None
    ) -> None:
        self._name = section_name
        self._data: dict[str, str] = {}
        if pairs:
            self.update(pairs)

    @property
    def name(self) -> str:
        return self._name

    def __getitem__(self, key: str) -> str:
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFound(self._name, key) from None

    def __setitem__(self, key: str, value: str) -> None:
        if not isinstance(key, str) or not isinstance(value, str):
            raise TypeError(
                f'{self} only accepts str pairs, '
                f'got {type(key).__name__}: {type(value).__name__}')
        self._data[key] = value

    def __delitem__(self, key: str) -> None:
        try:
            del self._data[key]
        except KeyError:
            raise KeyNotFound(self._name, key) from None

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __str__(self) -> str:
        return f'{SECTION_OPEN}{self._name}{SECTION_CLOSE}'

    def __repr__(self) -> str:
        return '[%s] { .cnt = %d }' % (self._name, len(self._data))

    def to_dict(self) -> dict[str, str]:
        """Plain copy of the pairs, detached from this section."""
        return self._data.copy()


class IniDocument(MutableMapping[str, IniSection]):
    """INI 文件表示。支持以下形式的小节和键值对（不保留注释）：

        ```ini
        [DEFAULT]
        ServerAliveInterval = 45
        Compression = yes

        [forge.example]
        User = hg
        ```

    小节按出现顺序排列，`set()`新建的小节追加在末尾。
    `doc[name] = {...}`总是*拷贝*一份，不会持有外部字典。
    """

    def __init__(self) -> None:
        self.__raw: dict[str, IniSection] = {}

    @classmethod
    def from_sections(
        cls, sections: Mapping[str, Mapping[str, object]]
    ) -> 'IniDocument':
        """Build a document from a nested `section -> key -> value` mapping.

        Values are converted with `str()`, keys are kept as they are.
        """
        ret = cls()
        for name, pairs in sections.items():
            ret[name] = {k: str(v) for k, v in pairs.items()}
        return ret

    def __getitem__(self, key: str) -> IniSection:
        try:
            return self.__raw[key]
        except KeyError:
            raise SectionNotFound(key) from None

    def __setitem__(self, key: str, value: Mapping[str, str]) -> None:
        # an existing key keeps its position in the dict.
        self.__raw[key] = IniSection(key, value)

    def __delitem__(self, key: str) -> None:
        try:
            del self.__raw[key]
        except KeyError:
            raise SectionNotFound(key) from None

    def __contains__(self, key: object) -> bool:
        return key in self.__raw

    def __len__(self) -> int:
        return len(self.__raw)

    def __iter__(self) -> Iterator[str]:
        return iter(self.__raw)

    def setdefault(  # type: ignore[override]
        self, key: str, default: Mapping[str, str] | None = None
    ) -> IniSection:
        if key not in self.__raw:
            self[key] = default or {}
        return self.__raw[key]

    def get_section_names(self) -> list[str]:
        return list(self.__raw)

    def get_sections(self) -> dict[str, dict[str, str]]:
        """Export as `{section: {key: value}}`. Changing it won't touch self."""
        return {name: sect.to_dict() for name, sect in self.__raw.items()}

    def get(self, section: str, key: str) -> str:  # type: ignore[override]
        """Look up a value.

        Unlike `Mapping.get()` there is no default: raises `SectionNotFound`
        or `KeyNotFound` instead.
        """
        return self[section][key]

    def set(self, section: str, key: str, value: str) -> None:
        """Insert or overwrite a value, creating the section if needed."""
        self.setdefault(section)[key] = value

    def rename(self, old: str, new: str) -> bool:
        """Rename a section, keeping its position.

        Returns:
            `True` if succeed, otherwise `False`.
            May not success if `old` is not found or `new` already exists.
        """
        if old not in self.__raw or new in self.__raw:
            return False
        self.__raw = {
            (new if name == old else name): (
                IniSection(new, sect) if name == old else sect)
            for name, sect in self.__raw.items()
        }
        return True

    def write_stream(self, fp: TextIOBase) -> None:
        for name, sect in self.__raw.items():
            fp.write(f'{SECTION_OPEN}{name}{SECTION_CLOSE}\n')
            for k, v in sect.items():
                fp.write(f'{k}{PAIRING}{v}\n')
            fp.write('\n')

    def to_string(self) -> str:
        with StringIO() as buf:
            self.write_stream(buf)
            return buf.getvalue()

    def save_to_file(
        self, path: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        # newline='' so `\n` is written as is on every platform.
        with open(path, 'w', encoding=encoding, newline='') as fp:
            self.write_stream(fp)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return '<IniDocument %s>' % ', '.join(
            repr(i) for i in self.__raw.values())

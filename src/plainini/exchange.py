# -*- encoding: utf-8 -*-
# @File   : exchange.py
# @Time   : 2026/10/18 17:12:46
# @Author : Kariko Lin

"""Convert `IniDocument` from/to JSON and YAML.

Both formats hold the same nested mapping as `IniDocument.get_sections()`:

    ```yaml
    DEFAULT:
      ServerAliveInterval: '45'
      Compression: 'yes'
    forge.example:
      User: hg
    ```

Comments and key order of the source file are irrelevant here,
while section and key order of the document are kept on writing.
"""

import json
import logging
from os import PathLike

import yaml

from .abstract import FileHandler
from .ini.model import IniDocument, IniError

logger = logging.getLogger(__name__)


class ExchangeFormatError(IniError, ValueError):
    """The JSON/YAML file is not a `{section: {key: value}}` mapping."""
    pass


def _scalar(section: str, key: str, val: object) -> str:
    if val is None:  # empty val
        return ''
    if isinstance(val, bool):
        return json.dumps(val)
    if isinstance(val, (str, int, float)):
        return str(val)
    raise ExchangeFormatError(
        f'[{section}] {key}: nested value of type {type(val).__name__} '
        'can not be stored in INI.')


def _to_document(src: object, filename: str) -> IniDocument:
    if src is None:  # empty file
        return IniDocument()
    if not isinstance(src, dict):
        raise ExchangeFormatError(
            f'{filename}: top level should be a mapping of sections, '
            f'got {type(src).__name__}.')
    ret = IniDocument()
    for name, pairs in src.items():
        if pairs is None or pairs == '':  # `section:` with no pairs
            pairs = {}
        if not isinstance(pairs, dict):
            raise ExchangeFormatError(
                f'{filename}: section "{name}" should be a mapping, '
                f'got {type(pairs).__name__}.')
        ret[str(name)] = {
            str(k): _scalar(name, k, v) for k, v in pairs.items()}
    logger.debug('%s: %d section(s) loaded', filename, len(ret))
    return ret


class IniJsonParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            return _to_document(json.load(fp), self._fn)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            json.dump(instance.get_sections(), fp,
                      ensure_ascii=False, indent=indent)
            fp.write('\n')


class IniYamlParser(FileHandler[IniDocument]):
    """Plain YAML, every scalar is read as `str`.

    So `Compression: yes` stays `'yes'` instead of YAML 1.1 `True`.
    """

    def __init__(
        self, filename: str | PathLike[str], encoding: str = 'utf-8'
    ) -> None:
        super().__init__(filename, encoding)

    def read(self) -> IniDocument:
        with open(self._fn, 'r', encoding=self._codec) as fp:
            # BaseLoader resolves no tags, all scalars come as str.
            src = yaml.load(fp, yaml.BaseLoader)
        return _to_document(src, self._fn)

    def write(self, instance: IniDocument, indent: int = 2) -> None:
        with open(self._fn, 'w', encoding=self._codec) as fp:
            yaml.safe_dump(
                instance.get_sections(), fp,
                allow_unicode=True,
                sort_keys=False,
                default_flow_style=False,
                indent=indent)

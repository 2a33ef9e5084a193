# -*- encoding: utf-8 -*-
# @File   : parser.py
# @Time   : 2026/10/18 16:41:19
# @Author : Kariko Lin

"""Reading INI text into `IniDocument`, and saving it back.

Parsing is all or nothing: the first bad line raises, and whatever had
been read so far is thrown away.

A pair before any `[section]` is an error by default. Pass `strict=False`
to drop such lines instead (like most game engines do).
"""

import logging
from io import StringIO, TextIOBase
from os import PathLike

import chardet

from ..abstract import FileHandler
from .consts import BOM, LineKind
from .lexer import classify
from .model import IniDocument, IniError, IniSection

logger = logging.getLogger(__name__)


class IniParseError(IniError, ValueError):
    """To record errors when reading INI text."""
    def __init__(self, message: str, lineno: int, line: str) -> None:
        super().__init__(f'line {lineno}: {message}: {line!r}')
        self.lineno = lineno
        self.line = line


class MalformedLine(IniParseError):
    pass


class OrphanKeyValue(IniParseError):
    pass


class IniParser(FileHandler[IniDocument]):
    def __init__(
        self, filename: str | PathLike[str],
        encoding: str | None = None, *,
        strict: bool = True
    ) -> None:
        super().__init__(filename, encoding)
        self._strict = strict

    @property
    def strict(self) -> bool:
        return self._strict

    @staticmethod
    def readstream(
        buf: TextIOBase,
        ins: IniDocument | None = None, *,
        strict: bool = True
    ) -> IniDocument:
        """读取解码好的字符串流。

        若给出`ins`，则读完整个流之后才并入这个已有的文档（同名小节依旧会被重置）；
        中途出错时`ins`保持原样。
        如没有特殊需求，直接调用`self.read()`或`load_from_string()`便是。
        """
        ret = IniDocument()
        this_sect: IniSection | None = None
        lineno = 0
        while i := buf.readline():
            lineno += 1
            line = i.rstrip('\n')
            if lineno == 1:
                line = line.removeprefix(BOM)
            tok = classify(line)
            match tok.kind:
                case LineKind.BLANK | LineKind.COMMENT:
                    continue
                case LineKind.SECTION:
                    if not tok.section:
                        raise MalformedLine('empty section name', lineno, line)
                    if tok.section in ret:
                        logger.debug('line %d: section [%s] reset',
                                     lineno, tok.section)
                    # a repeated header always starts over.
                    ret[tok.section] = {}
                    this_sect = ret[tok.section]
                case _ if this_sect is None and strict:
                    raise OrphanKeyValue(
                        'line does not belong to any section', lineno, line)
                case LineKind.MALFORMED:
                    raise MalformedLine('invalid key-value pair', lineno, line)
                case LineKind.KEY_VALUE if this_sect is None:
                    logger.debug('line %d: dropped orphan pair %r',
                                 lineno, line)
                case LineKind.KEY_VALUE:
                    this_sect[tok.key] = tok.value
        logger.debug('%d line(s) read, %d section(s)', lineno, len(ret))
        if ins is None:
            return ret
        for name, sect in ret.items():
            ins[name] = sect
        return ins

    @staticmethod
    def _decode_file(filename: str) -> StringIO:
        with open(filename, 'rb') as fp:
            raw = fp.read()

        codec = chardet.detect(raw)
        if codec['encoding'] is None or codec['confidence'] < 0.8:
            codec = {'encoding': 'utf-8', 'confidence': 0.0}
        logger.debug('%s: guessed encoding %s (confidence %.2f)',
                     filename, codec['encoding'], codec['confidence'])

        # fallbacks
        try:
            buf = raw.decode(codec['encoding'])
        except UnicodeDecodeError:
            buf = raw.decode('latin-1')
        # newline=None, so `\r\n` is read as `\n` like text-mode `open()`.
        return StringIO(buf, newline=None)

    def read(self) -> IniDocument:
        """读取`IniParser`实例指定的文件。

        `OSError`（找不到文件、没有权限等）原样抛出。
        """
        try:
            # when encoding is None, `open()` would fallback to system default.
            # and when encoding got wrong,
            # just `UnicodeDecodeError` and fallback to `chardet`.
            with open(self._fn, 'r', encoding=self._codec) as fp:
                return self.readstream(fp, strict=self._strict)
        except UnicodeDecodeError:
            return self.readstream(
                self._decode_file(self._fn), strict=self._strict)

    def write(self, instance: IniDocument) -> None:
        """保存到`IniParser`实例指定的文件（覆盖）。"""
        instance.save_to_file(self._fn, self._codec or 'utf-8')

    def __str__(self) -> str:
        return "INI file: " + super().__str__() + f"({self._codec})"


def load_from_string(text: str, *, strict: bool = True) -> IniDocument:
    return IniParser.readstream(StringIO(text), strict=strict)


def load_from_file(
    path: str | PathLike[str],
    encoding: str | None = None, *,
    strict: bool = True
) -> IniDocument:
    return IniParser(path, encoding, strict=strict).read()

# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 16:58:30
# @Author : Kariko Lin

from .consts import LineKind
from .lexer import IniLine, classify
from .model import (
    IniDocument,
    IniError,
    IniSection,
    KeyNotFound,
    SectionNotFound
)
from .parser import (
    IniParseError,
    IniParser,
    MalformedLine,
    OrphanKeyValue,
    load_from_file,
    load_from_string
)

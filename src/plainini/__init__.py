# -*- encoding: utf-8 -*-
# @File   : __init__.py
# @Time   : 2026/10/18 17:01:12
# @Author : Kariko Lin

import logging

from .ini import (
    IniDocument,
    IniError,
    IniParseError,
    IniParser,
    IniSection,
    KeyNotFound,
    MalformedLine,
    OrphanKeyValue,
    SectionNotFound,
    load_from_file,
    load_from_string
)
from .exchange import ExchangeFormatError, IniJsonParser, IniYamlParser

__all__ = [
    'IniDocument', 'IniSection', 'IniParser',
    'load_from_string', 'load_from_file',
    'IniJsonParser', 'IniYamlParser',
    'IniError', 'SectionNotFound', 'KeyNotFound',
    'IniParseError', 'MalformedLine', 'OrphanKeyValue',
    'ExchangeFormatError'
]

logging.basicConfig(level=logging.INFO,
                    format='[%(asctime)s] %(levelname)s: %(message)s')

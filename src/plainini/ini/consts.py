# -*- encoding: utf-8 -*-
# @File   : consts.py
# @Time   : 2026/10/18 16:05:37
# @Author : Kariko Lin

from enum import Enum


class LineKind(str, Enum):
    BLANK = 'blank'
    COMMENT = 'comment'
    SECTION = 'section'
    KEY_VALUE = 'key_value'
    MALFORMED = 'malformed'


COMMENT_MARKS = ('#', ';')
SECTION_OPEN = '['
SECTION_CLOSE = ']'
DELIMITER = '='

# canonical `key = value` spacing used when saving.
PAIRING = f' {DELIMITER} '

# utf-8 files saved by some editors start with it.
BOM = '\ufeff'

# -*- encoding: utf-8 -*-
# @File   : lexer.py
# @Time   : 2026/10/18 16:11:48
# @Author : Kariko Lin

"""Single line classification.

Every line of an INI text falls into exactly one `LineKind`:

    ```ini
                        ; BLANK
    # note              ; COMMENT (also `; note`)
    [forge.example]     ; SECTION, payload taken verbatim between brackets
    User = hg           ; KEY_VALUE, split on the first `=`
    oops                ; MALFORMED, no `=` at all
    ```

The classifier knows nothing about the current section, so orphan
pairs are left for the parser to judge.
"""

from typing import NamedTuple

from .consts import (
    COMMENT_MARKS,
    DELIMITER,
    SECTION_CLOSE,
    SECTION_OPEN,
    LineKind
)


class IniLine(NamedTuple):
    kind: LineKind
    text: str  # the trimmed line
    section: str | None = None
    key: str | None = None
    value: str | None = None


def classify(line: str) -> IniLine:
    """Classify one line of INI text. Never raises."""
    text = line.strip()
    if not text:
        return IniLine(LineKind.BLANK, text)
    if text.startswith(COMMENT_MARKS):
        return IniLine(LineKind.COMMENT, text)
    if (len(text) >= 2
            and text.startswith(SECTION_OPEN)
            and text.endswith(SECTION_CLOSE)):
        return IniLine(LineKind.SECTION, text, section=text[1:-1])

    key, sep, val = text.partition(DELIMITER)
    if not sep:
        return IniLine(LineKind.MALFORMED, text)
    return IniLine(LineKind.KEY_VALUE, text, key=key.strip(), value=val.strip())

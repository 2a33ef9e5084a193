import pytest

from plainini import IniDocument, load_from_string

SAMPLE = """\
[DEFAULT]
ServerAliveInterval = 45
Compression = yes

[forge.example]
User = hg

"""


@pytest.fixture
def sample_text() -> str:
    return SAMPLE


@pytest.fixture
def sample_doc() -> IniDocument:
    return load_from_string(SAMPLE)

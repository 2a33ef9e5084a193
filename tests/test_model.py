import pytest

from plainini import (
    IniDocument,
    IniError,
    IniSection,
    KeyNotFound,
    SectionNotFound,
)


def test_section_names(sample_doc: IniDocument) -> None:
    assert sample_doc.get_section_names() == ["DEFAULT", "forge.example"]
    assert IniDocument().get_section_names() == []


def test_get_sections(sample_doc: IniDocument) -> None:
    assert sample_doc.get_sections() == {
        "DEFAULT": {"ServerAliveInterval": "45", "Compression": "yes"},
        "forge.example": {"User": "hg"},
    }


def test_get_sections_is_a_copy(sample_doc: IniDocument) -> None:
    exported = sample_doc.get_sections()
    exported["DEFAULT"]["Compression"] = "no"
    exported["new"] = {}
    assert sample_doc.get("DEFAULT", "Compression") == "yes"
    assert "new" not in sample_doc


def test_get(sample_doc: IniDocument) -> None:
    assert sample_doc.get("DEFAULT", "ServerAliveInterval") == "45"


def test_get_missing_section(sample_doc: IniDocument) -> None:
    with pytest.raises(SectionNotFound) as exc:
        sample_doc.get("nope", "User")
    assert exc.value.section == "nope"
    assert isinstance(exc.value, KeyError)
    assert isinstance(exc.value, IniError)


def test_get_missing_key(sample_doc: IniDocument) -> None:
    with pytest.raises(KeyNotFound) as exc:
        sample_doc.get("forge.example", "Port")
    assert (exc.value.section, exc.value.key) == ("forge.example", "Port")
    assert "Port" in str(exc.value)


def test_set_overwrites(sample_doc: IniDocument) -> None:
    sample_doc.set("DEFAULT", "Compression", "no")
    assert sample_doc.get("DEFAULT", "Compression") == "no"
    # position of the key is kept
    assert list(sample_doc["DEFAULT"]) == ["ServerAliveInterval", "Compression"]


def test_set_creates_section_at_end(sample_doc: IniDocument) -> None:
    assert "NewSection" not in sample_doc
    sample_doc.set("NewSection", "key2", "value2")
    assert sample_doc.get("NewSection", "key2") == "value2"
    assert sample_doc.get_section_names()[-1] == "NewSection"


def test_set_is_idempotent(sample_doc: IniDocument) -> None:
    sample_doc.set("DEFAULT", "key1", "value1")
    once = sample_doc.get_sections()
    sample_doc.set("DEFAULT", "key1", "value1")
    assert sample_doc.get_sections() == once


def test_set_on_empty_document() -> None:
    doc = IniDocument()
    doc.set("a", "k", "v")
    assert doc.get_sections() == {"a": {"k": "v"}}


def test_section_name_matches_key(sample_doc: IniDocument) -> None:
    for name in sample_doc:
        assert sample_doc[name].name == name
    sample_doc["copied"] = sample_doc["forge.example"]
    assert sample_doc["copied"].name == "copied"


def test_setitem_copies_mapping() -> None:
    doc = IniDocument()
    pairs = {"k": "v"}
    doc["s"] = pairs
    pairs["k"] = "changed"
    assert doc.get("s", "k") == "v"
    assert isinstance(doc["s"], IniSection)


def test_non_str_value_rejected() -> None:
    doc = IniDocument()
    with pytest.raises(TypeError):
        doc.set("s", "port", 22)  # type: ignore[arg-type]


def test_delete(sample_doc: IniDocument) -> None:
    del sample_doc["DEFAULT"]["Compression"]
    assert "Compression" not in sample_doc["DEFAULT"]
    del sample_doc["forge.example"]
    assert sample_doc.get_section_names() == ["DEFAULT"]
    with pytest.raises(SectionNotFound):
        del sample_doc["forge.example"]
    with pytest.raises(KeyNotFound):
        del sample_doc["DEFAULT"]["Compression"]


def test_mapping_protocol(sample_doc: IniDocument) -> None:
    assert len(sample_doc) == 2
    assert "DEFAULT" in sample_doc
    assert "User" in sample_doc["forge.example"]
    assert sample_doc["forge.example"] == {"User": "hg"}
    assert sample_doc["forge.example"].to_dict() == {"User": "hg"}


def test_rename_keeps_position(sample_doc: IniDocument) -> None:
    assert sample_doc.rename("DEFAULT", "main")
    assert sample_doc.get_section_names() == ["main", "forge.example"]
    assert sample_doc["main"].name == "main"
    assert sample_doc.get("main", "Compression") == "yes"


def test_rename_refused(sample_doc: IniDocument) -> None:
    assert not sample_doc.rename("missing", "x")
    assert not sample_doc.rename("DEFAULT", "forge.example")
    assert sample_doc.get_section_names() == ["DEFAULT", "forge.example"]


def test_from_sections() -> None:
    doc = IniDocument.from_sections({"srv": {"port": 22, "host": "h"}})
    assert doc.get("srv", "port") == "22"
    assert doc.get_section_names() == ["srv"]


def test_to_string(sample_doc: IniDocument, sample_text: str) -> None:
    assert sample_doc.to_string() == sample_text
    assert str(sample_doc) == sample_text


def test_to_string_empty_section_and_document() -> None:
    doc = IniDocument()
    assert doc.to_string() == ""
    doc["empty"] = {}
    doc.set("full", "a", "1")
    assert doc.to_string() == "[empty]\n\n[full]\na = 1\n\n"


def test_save_to_file(sample_doc: IniDocument, tmp_path) -> None:
    target = tmp_path / "out.ini"
    sample_doc.save_to_file(target)
    assert target.read_bytes() == (
        b"[DEFAULT]\nServerAliveInterval = 45\nCompression = yes\n\n"
        b"[forge.example]\nUser = hg\n\n"
    )


def test_save_to_missing_directory(sample_doc: IniDocument, tmp_path) -> None:
    with pytest.raises(OSError):
        sample_doc.save_to_file(tmp_path / "no" / "such" / "dir.ini")

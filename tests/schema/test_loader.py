"""Tests for reading JSON, TOML, and YAML documents."""

from pathlib import Path

import pytest

from vrule.core.errors import DocumentError
from vrule.schema.loader import SUPPORTED_SUFFIXES, load_document

EXPECTED = {"root": {"ref": "Item"}, "definitions": {"Item": {"array": "string"}}}


class TestLoadDocument:
    def test_json(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.json"
        path.write_text(
            '{"root": {"ref": "Item"}, "definitions": {"Item": {"array": "string"}}}',
            encoding="utf-8",
        )
        assert load_document(path) == EXPECTED

    def test_toml(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.toml"
        path.write_text(
            'root = { ref = "Item" }\n\n[definitions.Item]\narray = "string"\n',
            encoding="utf-8",
        )
        assert load_document(path) == EXPECTED

    @pytest.mark.parametrize("suffix", [".yaml", ".yml", ".YAML"])
    def test_yaml(self, tmp_path: Path, suffix: str) -> None:
        path = tmp_path / f"schema{suffix}"
        path.write_text(
            "root: {ref: Item}\ndefinitions:\n  Item:\n    array: string\n",
            encoding="utf-8",
        )
        document = load_document(path)
        assert document == EXPECTED
        assert type(document) is dict

    def test_yaml_scalars(self, tmp_path: Path) -> None:
        path = tmp_path / "data.yaml"
        path.write_text("- 1\n- 2.5\n- true\n- null\n- text\n", encoding="utf-8")
        assert load_document(path) == [1, 2.5, True, None, "text"]

    def test_supported_suffixes(self) -> None:
        assert set(SUPPORTED_SUFFIXES) == {".json", ".toml", ".yaml", ".yml"}


class TestLoadErrors:
    def test_unsupported_suffix(self, tmp_path: Path) -> None:
        path = tmp_path / "schema.xml"
        path.write_text("<root/>", encoding="utf-8")
        with pytest.raises(DocumentError, match="Unsupported document type '.xml'") as excinfo:
            load_document(path)
        assert excinfo.value.path == path

    def test_missing_file(self, tmp_path: Path) -> None:
        path = tmp_path / "missing.json"
        with pytest.raises(DocumentError, match="Cannot read file") as excinfo:
            load_document(path)
        assert excinfo.value.path == path

    @pytest.mark.parametrize(
        ("name", "content", "label"),
        [
            ("bad.json", "{not json", "Invalid JSON"),
            ("bad.toml", "root = [", "Invalid TOML"),
            ("bad.yaml", "root: [unclosed", "Invalid YAML"),
        ],
    )
    def test_parse_errors(self, tmp_path: Path, name: str, content: str, label: str) -> None:
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        with pytest.raises(DocumentError, match=label) as excinfo:
            load_document(path)
        assert str(excinfo.value).startswith(str(path))

    def test_not_utf8(self, tmp_path: Path) -> None:
        path = tmp_path / "data.json"
        path.write_bytes(b"\xff\xfe{")
        with pytest.raises(DocumentError, match="not UTF-8 text") as excinfo:
            load_document(path)
        assert excinfo.value.path == path

    def test_json_integer_too_long(self, tmp_path: Path) -> None:
        path = tmp_path / "huge.json"
        path.write_text("1" * 5000, encoding="utf-8")
        with pytest.raises(DocumentError, match="Invalid JSON"):
            load_document(path)

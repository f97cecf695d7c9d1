from __future__ import annotations

import json
from pathlib import Path
from unittest.mock import patch

import pytest
import yaml

from servicegen.errors import SpecError
from servicegen.loader import _is_url, load_document, load_mapping


class TestLoadDocument:
    @pytest.mark.parametrize(
        "document",
        [
            pytest.param({}, id="missing-services"),
            pytest.param({"services": {}}, id="services-not-list"),
            pytest.param({"services": [], "models": {}}, id="models-not-list"),
        ],
    )
    def test_invalid_document_raises(self, document: dict[str, object]) -> None:
        with pytest.raises(SpecError):
            load_document(document)

    def test_loads_mapping(self, client_document: dict[str, object]) -> None:
        loaded = load_document(client_document)
        assert loaded["services"][0]["name"] == "User"

    def test_loads_json_file(self, tmp_path: Path, client_document: dict[str, object]) -> None:
        path = tmp_path / "client.json"
        path.write_text(json.dumps(client_document), encoding="utf-8")
        loaded = load_document(path)
        assert loaded["services"][0]["operations"][0]["name"] == "getUser"

    def test_loads_yaml_file(self, tmp_path: Path, client_document: dict[str, object]) -> None:
        path = tmp_path / "client.yaml"
        path.write_text(yaml.safe_dump(client_document), encoding="utf-8")
        loaded = load_document(str(path))
        assert loaded.get("models", [])[0]["name"] == "User"

    def test_non_object_file_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "client.json"
        path.write_text("[]", encoding="utf-8")
        with pytest.raises(SpecError):
            load_document(path)

    def test_invalid_yaml_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "client.yml"
        path.write_text("services: [unclosed", encoding="utf-8")
        with pytest.raises(SpecError):
            load_document(path)

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_document(tmp_path / "missing.json")


class TestLoadFromURL:
    def test_is_url_detects_http(self) -> None:
        assert _is_url("http://example.com/client.json") is True
        assert _is_url("https://example.com/client.yaml") is True
        assert _is_url("./local/client.json") is False
        assert _is_url("client.json") is False

    def test_loads_yaml_from_url(self, client_document: dict[str, object]) -> None:
        with patch("servicegen.loader._fetch_url", return_value=yaml.safe_dump(client_document)):
            loaded = load_document("https://example.com/client.yaml")
        assert loaded["services"][0]["name"] == "User"

    def test_fetch_failure_raises(self) -> None:
        with patch("servicegen.loader.urlopen", side_effect=OSError("unreachable")):
            with pytest.raises(SpecError):
                load_document("https://example.com/client.json")


class TestLoadMapping:
    def test_loads_config_file(self, tmp_path: Path) -> None:
        path = tmp_path / "config.yaml"
        path.write_text("client: angular\nservices:\n  asClass: true\n", encoding="utf-8")
        assert load_mapping(path) == {"client": "angular", "services": {"asClass": True}}

    def test_non_object_raises(self, tmp_path: Path) -> None:
        path = tmp_path / "config.json"
        path.write_text('"fetch"', encoding="utf-8")
        with pytest.raises(SpecError):
            load_mapping(path)

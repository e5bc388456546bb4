"""Tests for infrastructure.i18n.loader module."""

import pytest

from infrastructure.i18n import JSONTranslationLoader, YAMLTranslationLoader
from infrastructure.i18n.models import MessageKey


class TestYAMLTranslationLoader:
    """Tests for YAMLTranslationLoader."""

    def test_missing_directory(self, tmp_path):
        with pytest.raises(ValueError, match="not found"):
            YAMLTranslationLoader(tmp_path / "missing")

    def test_load_locale(self, yaml_loader):
        catalog = yaml_loader.load("en")
        assert sorted(catalog.sources) == ["en.slackin", "en.validation"]
        assert catalog.sources["en.slackin"]["submit"] == "Join"

    def test_load_locale_with_region(self, yaml_loader):
        catalog = yaml_loader.load("pt-br")
        assert list(catalog.sources) == ["pt-br.slackin"]
        key = MessageKey.from_string("slackin.placeholders.email")
        assert catalog.lookup(key, "pt-br") == "exemplo@exemplo.com"

    def test_load_unknown_locale(self, yaml_loader):
        with pytest.raises(FileNotFoundError):
            yaml_loader.load("fr")

    def test_load_all(self, yaml_loader):
        catalog = yaml_loader.load_all()
        assert sorted(catalog.sources) == [
            "en.slackin",
            "en.validation",
            "pt-br.slackin",
        ]

    def test_load_all_empty_directory(self, tmp_path):
        loader = YAMLTranslationLoader(tmp_path)
        with pytest.raises(ValueError, match="No translation files"):
            loader.load_all()

    def test_invalid_yaml(self, tmp_path):
        (tmp_path / "broken.en.yml").write_text("key: [unclosed", encoding="utf-8")
        loader = YAMLTranslationLoader(tmp_path)
        with pytest.raises(ValueError, match="Failed to parse"):
            loader.load("en")

    def test_non_mapping_namespace_skipped(self, tmp_path):
        (tmp_path / "mixed.en.yml").write_text(
            "good:\n  key: value\nbad: just a string\n", encoding="utf-8"
        )
        catalog = YAMLTranslationLoader(tmp_path).load("en")
        assert list(catalog.sources) == ["en.good"]

    def test_empty_file_ignored(self, temp_translations_dir):
        (temp_translations_dir / "empty.en.yml").write_text("", encoding="utf-8")
        catalog = YAMLTranslationLoader(temp_translations_dir).load("en")
        assert "en.empty" not in catalog.sources

    def test_namespace_split_across_files(self, tmp_path):
        (tmp_path / "a.en.yml").write_text(
            "validation:\n  attributes:\n    email: e-mail\n", encoding="utf-8"
        )
        (tmp_path / "b.en.yml").write_text(
            "validation:\n  attributes:\n    username: name\n  required: needed\n",
            encoding="utf-8",
        )
        catalog = YAMLTranslationLoader(tmp_path).load("en")
        assert catalog.sources["en.validation"] == {
            "attributes": {"email": "e-mail", "username": "name"},
            "required": "needed",
        }

    def test_cache(self, temp_translations_dir):
        loader = YAMLTranslationLoader(temp_translations_dir, use_cache=True)
        first = loader.load("en")
        assert loader.load("en") is first
        loader.clear_cache()
        assert loader.load("en") is not first

    def test_no_cache(self, yaml_loader):
        assert yaml_loader.load("en") is not yaml_loader.load("en")
        assert yaml_loader.cache == {}


class TestJSONTranslationLoader:
    """Tests for JSONTranslationLoader."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(ValueError, match="not found"):
            JSONTranslationLoader(tmp_path / "missing.json")

    def test_load_all(self, json_bundle):
        catalog = JSONTranslationLoader(json_bundle).load_all()
        assert catalog.sources == {
            "en.slackin": {"submit": "Join"},
            "pt-br.slackin": {"submit": "Entrar"},
        }

    def test_load_filters_by_locale(self, json_bundle):
        catalog = JSONTranslationLoader(json_bundle).load("pt-br")
        assert list(catalog.sources) == ["pt-br.slackin"]

    def test_load_unknown_locale(self, json_bundle):
        with pytest.raises(FileNotFoundError):
            JSONTranslationLoader(json_bundle).load("pt")

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "broken.json"
        path.write_text("{not json", encoding="utf-8")
        with pytest.raises(ValueError, match="Failed to parse"):
            JSONTranslationLoader(path).load_all()

    def test_non_object_bundle(self, tmp_path):
        path = tmp_path / "list.json"
        path.write_text("[1, 2]", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON object"):
            JSONTranslationLoader(path).load_all()

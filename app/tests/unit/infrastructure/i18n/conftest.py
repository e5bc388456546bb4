"""Feature-level fixtures for i18n system tests."""

import json

import pytest
import yaml


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML catalog files.

    Returns a directory structure like:
    - slackin.en.yml
    - validation.en.yml
    - slackin.pt-br.yml
    """
    en_slackin = {
        "slackin": {
            "submit": "Join",
            "users_online": "{0} Nobody online|{1} One online|[2,Inf] :count online",
            "placeholders": {"email": "example@example.com"},
        }
    }
    with open(tmp_path / "slackin.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_slackin, f, allow_unicode=True)

    en_validation = {
        "validation": {
            "required": "The :attribute field is required.",
            "attributes": {"email": "e-mail"},
        }
    }
    with open(tmp_path / "validation.en.yml", "w", encoding="utf-8") as f:
        yaml.dump(en_validation, f, allow_unicode=True)

    pt_br_slackin = {
        "slackin": {
            "submit": "Entrar",
            "placeholders": {"email": "exemplo@exemplo.com"},
        }
    }
    with open(tmp_path / "slackin.pt-br.yml", "w", encoding="utf-8") as f:
        yaml.dump(pt_br_slackin, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLTranslationLoader for temporary translations directory."""
    from infrastructure.i18n import YAMLTranslationLoader

    return YAMLTranslationLoader(temp_translations_dir, use_cache=False)


@pytest.fixture
def json_bundle(tmp_path):
    """Write a catalog bundle in the "<locale>.<namespace>" JSON format."""
    bundle = {
        "en.slackin": {"submit": "Join"},
        "pt-br.slackin": {"submit": "Entrar"},
    }
    path = tmp_path / "messages.json"
    path.write_text(json.dumps(bundle), encoding="utf-8")
    return path

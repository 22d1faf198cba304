"""Tests for configuration helpers."""

import pytest

from food_digest.config import Settings, parse_person_keys


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("PERSON_ONE_KEY", "Ana")
    monkeypatch.setenv("PERSON_TWO_KEY", "Bo")
    monkeypatch.setenv("DIGEST_DEBUG", "true")

    settings = Settings()

    assert settings.person_one_key == "Ana"
    assert settings.person_two_key == "Bo"
    assert settings.digest_debug is True
    assert settings.catalog_path is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Jm,Ren", ("Jm", "Ren")),
        (" Jm , Ren ", ("Jm", "Ren")),
        (None, None),
        ("", None),
        ("Jm", None),
        ("Jm,Ren,Ana", None),
    ],
)
def test_parse_person_keys(raw, expected) -> None:
    assert parse_person_keys(raw) == expected

import pytest

from arcext.translations import (
    ExtensionTranslation,
    Language,
    translate,
    translations_for,
)


def test_pinned_values_from_tables():
    assert translate(ExtensionTranslation.LEFT, Language.ENGLISH) == "Left"
    assert translate(ExtensionTranslation.LEFT, Language.GERMAN) == "Links"
    assert translate(ExtensionTranslation.LEFT, Language.FRENCH) == "Gauche"
    assert translate(ExtensionTranslation.LEFT, Language.SPANISH) == "Izquierda"


def test_non_ascii_entries():
    assert (
        translate(ExtensionTranslation.SIZING_POLICY_MANUAL_WINDOW_SIZE, Language.GERMAN)
        == "Manuelle Fenstergröße"
    )
    assert translate(ExtensionTranslation.UNALIGNED, Language.SPANISH) == "Estándar"


def test_last_entry_is_settings_show_header_text():
    assert (
        translate(ExtensionTranslation.SETTINGS_SHOW_HEADER_TEXT, Language.ENGLISH)
        == "Show header with text instead of images"
    )
    assert translate(ExtensionTranslation.LANGUAGE, Language.GERMAN) == "Sprache"


def test_default_language_is_english():
    assert translate(ExtensionTranslation.APPLY_BUTTON) == "Apply"
    assert translations_for() == translations_for(Language.ENGLISH)


@pytest.mark.parametrize("language", list(Language))
def test_every_table_covers_every_key(language):
    table = translations_for(language)
    assert len(table) == len(ExtensionTranslation)
    assert all(isinstance(text, str) and text for text in table)


@pytest.mark.parametrize("language", list(Language))
def test_table_and_translate_agree(language):
    table = translations_for(language)
    for key in ExtensionTranslation:
        assert translate(key, language) == table[key]


@pytest.mark.parametrize("language", list(Language))
def test_update_description_has_one_placeholder(language):
    text = translate(ExtensionTranslation.UPDATE_DESC, language)
    assert text.count("{}") == 1
    assert "Example" in text.format("Example")


def test_plain_integers_are_accepted():
    assert translate(int(ExtensionTranslation.CANCEL_BUTTON), int(Language.GERMAN)) == "Abbrechen"


def test_unknown_key_raises():
    with pytest.raises(ValueError):
        translate(len(ExtensionTranslation), Language.ENGLISH)


def test_unknown_language_raises():
    with pytest.raises(ValueError):
        translations_for(1)


def test_languages_differ():
    assert translations_for(Language.ENGLISH) != translations_for(Language.GERMAN)
    assert translations_for(Language.FRENCH) != translations_for(Language.SPANISH)
import pytest

from lingo.engines.translation import fill_placeholders, translate
from lingo.languages import Language


@pytest.fixture
def french() -> Language:
    return Language("fr", "French").add_translations({
        "Hello {name}": "Bonjour {name}",
        "{count} new messages": "{count} nouveaux messages",
        "Blank": "",
    })


def test_translates_known_string(french):
    assert translate(french, "Hello {name}", {"name": "TJ"}) == "Bonjour TJ"


def test_unknown_string_is_its_own_template(french):
    assert translate(french, "Goodbye") == "Goodbye"
    assert translate(french, "Goodbye {name}", {"name": "TJ"}) == "Goodbye TJ"


def test_placeholders_untouched_without_params(french):
    assert translate(french, "Hello {name}") == "Bonjour {name}"


def test_param_values_are_stringified(french):
    assert translate(french, "{count} new messages", {"count": 3}) == "3 nouveaux messages"


def test_missing_param_renders_as_undefined(french):
    assert translate(french, "Hello {name}", {}) == "Bonjour undefined"
    assert translate(french, "Hello {name}", {"other": "x"}) == "Bonjour undefined"


def test_empty_translation_falls_back_to_source(french):
    assert translate(french, "Blank") == "Blank"


def test_language_translate_delegates(french):
    french.add_translation("Bye", "Au revoir")
    assert french.translate("Bye") == "Au revoir"
    assert french.translate("Hello {name}", {"name": "Ana"}) == "Bonjour Ana"


def test_fill_placeholders_replaces_every_occurrence():
    assert fill_placeholders("{a}-{b}-{a}", {"a": 1, "b": "two"}) == "1-two-1"

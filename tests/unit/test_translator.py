"""
Unit tests for the locale translator
"""

import pytest
import yaml
from unittest.mock import AsyncMock

from checktasks.exceptions import TranslationServiceError
from checktasks.models.locale import TranslationRequest
from checktasks.services.translator import LocaleTranslator, prepare_source_text


class TestPrepareSourceText:
    """Test cases for source text cleanup"""

    def test_missing_value(self):
        assert prepare_source_text(None) == ""

    def test_newline_runs_removed(self):
        assert prepare_source_text("Line one\n\nLine two\n") == "Line oneLine two"

    def test_non_leaf_value(self):
        assert prepare_source_text({"a": "b"}) == ""

    def test_non_string_leaf(self):
        assert prepare_source_text(42) == "42"


class TestLocaleTranslator:
    """Test cases for LocaleTranslator"""

    @pytest.mark.asyncio
    async def test_translate_merges_siblings(self, translator, reference_tree):
        request = TranslationRequest(keys=["menu.file.open", "menu.file.save"], language="fr")

        result = await translator.translate(reference_tree, request)

        assert result == {"fr": {"menu": {"file": {"open": "[fr] Open", "save": "[fr] Save"}}}}

    @pytest.mark.asyncio
    async def test_translate_calls_service_in_order(self, translator, fake_translation_service, reference_tree):
        request = TranslationRequest(keys=["greeting", "errors.not_found", "errors.forbidden"], language="ja")

        await translator.translate(reference_tree, request)

        calls = fake_translation_service.translate.await_args_list
        assert [c.args for c in calls] == [
            ("Hello", "en", "ja", "html"),
            ("Notfound", "en", "ja", "html"),
            ("<b>Forbidden</b>", "en", "ja", "html"),
        ]

    @pytest.mark.asyncio
    async def test_missing_key_translates_empty_string(self, translator, fake_translation_service, reference_tree):
        request = TranslationRequest(keys=["does.not.exist"], language="es")

        result = await translator.translate(reference_tree, request)

        fake_translation_service.translate.assert_awaited_once_with("", "en", "es", "html")
        assert result == {"es": {"does": {"not": {"exist": "[es] "}}}}

    @pytest.mark.asyncio
    async def test_repeated_key_overwrites_leaf(self, fake_translation_service, reference_tree):
        fake_translation_service.translate.side_effect = ["first", "second"]
        translator = LocaleTranslator(fake_translation_service)
        request = TranslationRequest(keys=["greeting", "greeting"], language="fr")

        result = await translator.translate(reference_tree, request)

        assert result == {"fr": {"greeting": "second"}}

    @pytest.mark.asyncio
    async def test_service_failure_aborts_run(self, fake_translation_service, reference_tree):
        fake_translation_service.translate.side_effect = ["ok", TranslationServiceError("quota exceeded"), "never"]
        translator = LocaleTranslator(fake_translation_service)
        request = TranslationRequest(keys=["greeting", "menu.file.open", "menu.file.save"], language="fr")

        with pytest.raises(TranslationServiceError):
            await translator.translate(reference_tree, request)
        assert fake_translation_service.translate.await_count == 2

    @pytest.mark.asyncio
    async def test_text_format_passed_through(self, fake_translation_service, reference_tree):
        translator = LocaleTranslator(fake_translation_service, text_format="text")
        request = TranslationRequest(keys=["greeting"], language="fr")

        await translator.translate(reference_tree, request)

        fake_translation_service.translate.assert_awaited_once_with("Hello", "en", "fr", "text")

    @pytest.mark.asyncio
    async def test_translate_file_writes_output(self, translator, reference_tree, tmp_path):
        locale_path = tmp_path / "en.yml"
        locale_path.write_text(yaml.safe_dump(reference_tree), encoding="utf-8")
        values_file = tmp_path / "missing.txt"
        values_file.write_text("  greeting  \n\nmenu.file.open\n", encoding="utf-8")
        output_dir = tmp_path / "out"
        output_dir.mkdir()

        output = await translator.translate_file(locale_path, values_file, "fr", output_dir)

        assert output == output_dir / "fr.yml"
        written = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert written == {"fr": {"greeting": "[fr] Hello", "menu": {"file": {"open": "[fr] Open"}}}}

    @pytest.mark.asyncio
    async def test_translate_file_boolean_word_keys(self, translator, fake_translation_service, tmp_path):
        locale_path = tmp_path / "en.yml"
        locale_path.write_text("en:\n  helpers:\n    yes: 'Yes'\n    no: 'No'\n", encoding="utf-8")
        values_file = tmp_path / "missing.txt"
        values_file.write_text("helpers.yes\nhelpers.no\n", encoding="utf-8")

        output = await translator.translate_file(locale_path, values_file, "fr", tmp_path)

        assert [c.args[0] for c in fake_translation_service.translate.await_args_list] == ["Yes", "No"]
        written = yaml.safe_load(output.read_text(encoding="utf-8"))
        assert written == {"fr": {"helpers": {"yes": "[fr] Yes", "no": "[fr] No"}}}

    @pytest.mark.asyncio
    async def test_translate_file_writes_nothing_on_failure(self, fake_translation_service, reference_tree, tmp_path):
        fake_translation_service.translate.side_effect = TranslationServiceError("network down")
        translator = LocaleTranslator(fake_translation_service)
        locale_path = tmp_path / "en.yml"
        locale_path.write_text(yaml.safe_dump(reference_tree), encoding="utf-8")
        values_file = tmp_path / "missing.txt"
        values_file.write_text("greeting\n", encoding="utf-8")

        with pytest.raises(TranslationServiceError):
            await translator.translate_file(locale_path, values_file, "fr", tmp_path)
        assert not (tmp_path / "fr.yml").exists()


class TestTranslationRequest:
    """Test cases for TranslationRequest"""

    def test_from_file_strips_lines(self, tmp_path):
        values_file = tmp_path / "keys.txt"
        values_file.write_text(" a.b \r\n\n c \n", encoding="utf-8")

        request = TranslationRequest.from_file(values_file, "de")

        assert request.keys == ["a.b", "c"]
        assert request.language == "de"
        assert request.source_language == "en"
        assert len(request) == 2

    def test_invalid_language(self):
        with pytest.raises(ValueError):
            TranslationRequest(keys=["a"], language="../etc")

    def test_invalid_key_path(self):
        with pytest.raises(ValueError):
            TranslationRequest(keys=["a..b"], language="fr")

"""
Pytest configuration and fixtures
"""

import pytest
from pathlib import Path
from typing import Any, Callable, Dict
from unittest.mock import AsyncMock

import yaml

# Add src to path for imports
import sys
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from checktasks.config.settings import Settings, CheckerSettings, TranslatorSettings
from checktasks.services.translation_service import GoogleTranslateService, TranslationService
from checktasks.services.translator import LocaleTranslator


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Create test settings."""
    return Settings(
        checker=CheckerSettings(
            directories=[str(tmp_path / "locales")],
        ),
        translator=TranslatorSettings(
            backend="google",
            api_key="test_google_key",
        )
    )


@pytest.fixture
def write_locale() -> Callable[[Path, str, Dict[str, Any]], Path]:
    """Write `<code>.yml` rooted under the locale code into a directory."""
    def _write(directory: Path, code: str, contents: Dict[str, Any]) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{code}.yml"
        path.write_text(yaml.safe_dump({code: contents}, allow_unicode=True), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def locale_dir(tmp_path: Path) -> Path:
    """Empty locale directory."""
    directory = tmp_path / "locales"
    directory.mkdir()
    return directory


@pytest.fixture
def fake_translation_service() -> AsyncMock:
    """Translation service that tags the text with the target language."""
    service = AsyncMock(spec=TranslationService)

    async def _translate(text, source, target, text_format='html'):
        return f"[{target}] {text}"

    service.translate.side_effect = _translate
    return service


@pytest.fixture
def translator(fake_translation_service: AsyncMock) -> LocaleTranslator:
    """Create locale translator backed by the fake service."""
    return LocaleTranslator(fake_translation_service)


@pytest.fixture
def google_service(test_settings: Settings) -> GoogleTranslateService:
    """Create Google Translate service for testing."""
    return GoogleTranslateService(test_settings.translator)


@pytest.fixture
def reference_tree() -> Dict[str, Any]:
    """Reference English locale content."""
    return {
        "en": {
            "greeting": "Hello",
            "errors": {
                "not_found": "Not\nfound",
                "forbidden": "<b>Forbidden</b>",
            },
            "menu": {
                "file": {
                    "open": "Open",
                    "save": "Save",
                },
            },
        }
    }

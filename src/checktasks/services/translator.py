"""
Builds translated locale trees from the reference locale
"""

import logging
import re
from pathlib import Path
from typing import Any, Dict, Union

from checktasks.locales.flattener import add_value, dig, split_key
from checktasks.locales.loader import load_locale_file, unwrap_locale
from checktasks.locales.writer import write_locale_file
from checktasks.models.locale import LocaleTree, TranslationRequest
from checktasks.services.translation_service import TranslationService

logger = logging.getLogger(__name__)

_NEWLINES = re.compile(r'\n+')


def prepare_source_text(value: Any) -> str:
    """Source text for a looked-up value; missing and non-leaf values translate as ''"""
    if value is None or isinstance(value, dict):
        return ''
    return _NEWLINES.sub('', str(value))


class LocaleTranslator:
    """Translates reference locale values and assembles them into a new locale tree"""

    def __init__(self, service: TranslationService, source_language: str = 'en', text_format: str = 'html'):
        self.service = service
        self.source_language = source_language
        self.text_format = text_format

    async def translate(self, reference_tree: LocaleTree, request: TranslationRequest) -> Dict[str, Any]:
        """
        Translate every requested key into request.language

        Args:
            reference_tree: Full reference locale file content, rooted under its locale code
            request: Key paths and target language

        Returns:
            New tree rooted under the target language code
        """
        contents = unwrap_locale(reference_tree, request.source_language, source='reference locale')
        assembled: Dict[str, Any] = {}

        # One request at a time; a failure aborts the whole run
        for index, key_path in enumerate(request.keys, start=1):
            segments = split_key(key_path)
            value = dig(contents, segments)
            if value is None:
                logger.warning(f"Key {key_path} not found in reference locale, translating empty string")
            elif isinstance(value, dict):
                logger.warning(f"Key {key_path} is not a leaf in reference locale, translating empty string")

            translated = await self.service.translate(
                prepare_source_text(value),
                request.source_language,
                request.language,
                self.text_format
            )
            add_value(assembled, [request.language] + segments, translated)
            logger.debug(f"[{index}/{len(request)}] Translated {key_path}")

        logger.info(f"Translated {len(request)} keys into {request.language}")
        return assembled

    async def translate_file(
        self,
        locale_path: Union[str, Path],
        values_file: Union[str, Path],
        language: str,
        output_dir: Union[str, Path] = '.'
    ) -> Path:
        """Translate the keys listed in values_file and write `<language>.yml`"""
        reference_tree = load_locale_file(locale_path)
        request = TranslationRequest.from_file(values_file, language, self.source_language)
        logger.info(f"Translating {len(request)} keys from {locale_path} into {language}")

        assembled = await self.translate(reference_tree, request)
        return write_locale_file(assembled, language, output_dir)

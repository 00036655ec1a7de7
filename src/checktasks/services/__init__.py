"""
Services for checktasks
"""

from .translation_service import (
    TranslationService,
    GoogleTranslateService,
    OpenAITranslationService,
    create_translation_service,
)
from .translator import LocaleTranslator, prepare_source_text

__all__ = [
    'TranslationService', 'GoogleTranslateService', 'OpenAITranslationService',
    'create_translation_service', 'LocaleTranslator', 'prepare_source_text',
]

"""
Configuration settings with validation
"""

import logging
import os
from dataclasses import dataclass, field, replace
from typing import List, Optional
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

logger = logging.getLogger(__name__)


MISSING_REFERENCE_POLICIES = ['skip', 'error']
TRANSLATION_BACKENDS = ['google', 'openai']


def _api_key_for(backend: str) -> Optional[str]:
    if backend == 'openai':
        return os.getenv('OPENAI_API_KEY')
    return os.getenv('GOOGLE_API_KEY')


@dataclass
class CheckerSettings:
    """Locale completeness checker configuration"""
    directories: List[str] = field(default_factory=list)
    reference_file: str = 'en.yml'
    missing_reference: str = 'skip'

    def __post_init__(self):
        if not self.reference_file.endswith('.yml'):
            raise ValueError("Reference locale file must be a .yml file")

        self.missing_reference = self.missing_reference.lower()
        if self.missing_reference not in MISSING_REFERENCE_POLICIES:
            raise ValueError(
                f"Missing reference policy must be one of: {', '.join(MISSING_REFERENCE_POLICIES)}"
            )


@dataclass
class TranslatorSettings:
    """Machine translation configuration"""
    backend: str = 'google'
    api_key: Optional[str] = None
    base_url: Optional[str] = None
    model: str = 'gpt-4o-mini'
    source_language: str = 'en'
    text_format: str = 'html'
    timeout: float = 30.0

    def __post_init__(self):
        self.backend = self.backend.lower()
        if self.backend not in TRANSLATION_BACKENDS:
            raise ValueError(f"Translation backend must be one of: {', '.join(TRANSLATION_BACKENDS)}")

        if self.text_format not in ['html', 'text']:
            raise ValueError("Translation format must be 'html' or 'text'")

        if self.timeout <= 0:
            raise ValueError("Translation timeout must be positive")

    def with_backend(self, backend: str) -> 'TranslatorSettings':
        """Copy of these settings for another backend, with that backend's API key"""
        backend = backend.lower()
        if backend == self.backend:
            return self
        return replace(self, backend=backend, api_key=_api_key_for(backend))

    def require_api_key(self) -> str:
        """Return the API key or fail if it is not configured"""
        if not self.api_key:
            env_name = 'GOOGLE_API_KEY' if self.backend == 'google' else 'OPENAI_API_KEY'
            raise ValueError(f"{env_name} is required for the '{self.backend}' translation backend")
        return self.api_key


@dataclass
class Settings:
    """Main configuration settings"""
    checker: CheckerSettings
    translator: TranslatorSettings
    log_level: str = 'INFO'

    def __post_init__(self):
        # Validate log level
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if self.log_level.upper() not in valid_levels:
            raise ValueError(f"Log level must be one of: {', '.join(valid_levels)}")

        self.log_level = self.log_level.upper()

    @classmethod
    def from_env(cls) -> 'Settings':
        """Create settings from environment variables"""
        directories_str = os.getenv('LOCALE_DIRECTORIES', '')
        directories = [d.strip() for d in directories_str.split(',') if d.strip()]

        backend = os.getenv('TRANSLATION_BACKEND', 'google').lower()

        try:
            timeout = float(os.getenv('TRANSLATION_TIMEOUT', '30'))
        except ValueError:
            raise ValueError("Invalid TRANSLATION_TIMEOUT format. Use a number of seconds.")

        return cls(
            checker=CheckerSettings(
                directories=directories,
                reference_file=os.getenv('REFERENCE_LOCALE_FILE', 'en.yml'),
                missing_reference=os.getenv('MISSING_REFERENCE_POLICY', 'skip')
            ),
            translator=TranslatorSettings(
                backend=backend,
                api_key=_api_key_for(backend),
                base_url=os.getenv('OPENAI_BASE_URL'),
                model=os.getenv('OPENAI_MODEL') or 'gpt-4o-mini',
                timeout=timeout
            ),
            log_level=os.getenv('LOG_LEVEL', 'INFO')
        )


def load_settings() -> Settings:
    """Load and return application settings"""
    try:
        settings = Settings.from_env()
    except ValueError as e:
        logger.error(f"Failed to load configuration: {e}")
        raise

    logger.debug("Configuration loaded successfully")
    return settings

"""
Machine translation service clients
"""

import asyncio
import html
import logging
from abc import ABC, abstractmethod
from typing import Optional

import aiohttp
from openai import AsyncOpenAI, OpenAIError

from checktasks.config.settings import TranslatorSettings
from checktasks.exceptions import TranslationServiceError

logger = logging.getLogger(__name__)


class TranslationService(ABC):
    """Translates a single text from one language into another"""

    @abstractmethod
    async def translate(self, text: str, source: str, target: str, text_format: str = 'html') -> str:
        """Return the translated text or raise TranslationServiceError"""

    async def close(self):
        """Release any open connections"""

    async def __aenter__(self) -> 'TranslationService':
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.close()


class GoogleTranslateService(TranslationService):
    """Google Cloud Translation API (v2, basic) client"""

    API_URL = 'https://translation.googleapis.com/language/translate/v2'

    def __init__(self, settings: TranslatorSettings):
        self.settings = settings
        self.api_key = settings.require_api_key()
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_lock = asyncio.Lock()

    async def _get_session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session"""
        async with self._session_lock:
            if self._session is None or self._session.closed:
                timeout = aiohttp.ClientTimeout(total=self.settings.timeout, connect=10)
                self._session = aiohttp.ClientSession(timeout=timeout)
            return self._session

    async def close(self):
        """Close HTTP session"""
        async with self._session_lock:
            if self._session and not self._session.closed:
                await self._session.close()
                self._session = None

    async def translate(self, text: str, source: str, target: str, text_format: str = 'html') -> str:
        payload = {
            'q': text,
            'source': source,
            'target': target,
            'format': text_format,
        }

        try:
            session = await self._get_session()
            async with session.post(self.API_URL, params={'key': self.api_key}, data=payload) as response:
                if response.status != 200:
                    try:
                        body = await response.text()
                    except Exception:
                        body = ''
                    raise TranslationServiceError(
                        f"Translation request failed HTTP {response.status}; body: {body[:500]}"
                    )

                try:
                    data = await response.json()
                except aiohttp.ContentTypeError as e:
                    raise TranslationServiceError(f"Translation response not JSON: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise TranslationServiceError(f"Translation request failed: {e}") from e

        try:
            translated = data['data']['translations'][0]['translatedText']
        except (KeyError, IndexError, TypeError) as e:
            raise TranslationServiceError(f"Translation response missing translatedText: {data}") from e

        # Plain text results come back HTML-escaped
        if text_format == 'text':
            translated = html.unescape(translated)
        return translated


class OpenAITranslationService(TranslationService):
    """Translation through an OpenAI-compatible chat completion API"""

    def __init__(self, settings: TranslatorSettings):
        self.settings = settings
        self.client = AsyncOpenAI(
            api_key=settings.require_api_key(),
            base_url=settings.base_url,
            timeout=settings.timeout
        )

    def _build_prompt(self, source: str, target: str, text_format: str) -> str:
        """Build the system prompt for one translation"""
        markup = "Keep any HTML tags and entities unchanged. " if text_format == 'html' else ""
        return (
            f"You translate user interface strings from '{source}' to '{target}'. "
            f"{markup}Keep interpolation placeholders such as %{{name}} unchanged. "
            "Respond ONLY with the translated text."
        )

    async def translate(self, text: str, source: str, target: str, text_format: str = 'html') -> str:
        if not text:
            return ''

        try:
            response = await self.client.chat.completions.create(
                model=self.settings.model,
                messages=[
                    {"role": "system", "content": self._build_prompt(source, target, text_format)},
                    {"role": "user", "content": text}
                ],
                temperature=0
            )
        except OpenAIError as e:
            raise TranslationServiceError(f"Translation request failed: {e}") from e

        content = response.choices[0].message.content
        if content is None:
            raise TranslationServiceError("Translation response was empty")
        return content.strip()

    async def close(self):
        await self.client.close()


def create_translation_service(settings: TranslatorSettings) -> TranslationService:
    """Create the translation client configured by settings.backend"""
    if settings.backend == 'openai':
        logger.debug(f"Using OpenAI translation backend with model {settings.model}")
        return OpenAITranslationService(settings)
    logger.debug("Using Google Translate backend")
    return GoogleTranslateService(settings)

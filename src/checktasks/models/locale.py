"""
Locale-related data models
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from checktasks.utils.validators import InputValidator

# Nested mapping of string keys to leaf strings or further mappings
LocaleTree = Dict[str, Any]

# Locale file path -> dotted key paths present in only one of the two locales
IssueSet = Dict[str, List[str]]


@dataclass
class LocaleDirectoryGroup:
    """One directory's reference locale file plus its other locale files"""
    directory: str
    reference: Optional[str] = None
    others: List[str] = field(default_factory=list)

    @property
    def has_reference(self) -> bool:
        return self.reference is not None


@dataclass
class TranslationRequest:
    """Dotted key paths to translate from the source language into `language`"""
    keys: List[str]
    language: str
    source_language: str = 'en'

    def __post_init__(self):
        ok, error = InputValidator.validate_language_code(self.language)
        if not ok:
            raise ValueError(error)

        self.language = self.language.strip()
        self.keys = [key.strip() for key in self.keys]

        for key in self.keys:
            ok, error = InputValidator.validate_key_path(key)
            if not ok:
                raise ValueError(error)

    @classmethod
    def from_file(cls, values_file: Union[str, Path], language: str, source_language: str = 'en') -> 'TranslationRequest':
        """Read one dotted key path per line, skipping blank lines"""
        with open(values_file, 'r', encoding='utf-8') as f:
            keys = [line.strip() for line in f if line.strip()]
        return cls(keys=keys, language=language, source_language=source_language)

    def __len__(self) -> int:
        return len(self.keys)

"""
Data models for checktasks
"""

from .locale import LocaleTree, IssueSet, LocaleDirectoryGroup, TranslationRequest
from .gem import GemVersion

__all__ = ['LocaleTree', 'IssueSet', 'LocaleDirectoryGroup', 'TranslationRequest', 'GemVersion']

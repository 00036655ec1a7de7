"""
Configuration module for checktasks
"""

from .settings import Settings, CheckerSettings, TranslatorSettings, load_settings

__all__ = ['Settings', 'CheckerSettings', 'TranslatorSettings', 'load_settings']

"""
Locale file checking and writing
"""

from .flattener import flatten_keys, split_key, dig, add_value, build_tree
from .loader import arrange_locales, load_locale_file, unwrap_locale, load_keys
from .checker import Locales, compare_locales
from .writer import write_locale_file, dump_locale

__all__ = [
    'flatten_keys', 'split_key', 'dig', 'add_value', 'build_tree',
    'arrange_locales', 'load_locale_file', 'unwrap_locale', 'load_keys',
    'Locales', 'compare_locales',
    'write_locale_file', 'dump_locale',
]

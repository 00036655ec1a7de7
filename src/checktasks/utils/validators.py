"""
Input validation utilities
"""

import re
from typing import Tuple


class InputValidator:
    """Input data validation"""

    @staticmethod
    def validate_language_code(lang: str) -> Tuple[bool, str]:
        """Validate language code (e.g. 'fr', 'pt-BR', 'zh_CN')"""
        if not lang or not lang.strip():
            return False, "Language code cannot be empty"

        if not re.match(r'^[a-zA-Z]{2,3}([-_][a-zA-Z0-9]{2,8})?$', lang.strip()):
            return False, f"Invalid language code: {lang!r}"

        return True, ""

    @staticmethod
    def validate_key_path(key_path: str) -> Tuple[bool, str]:
        """Validate a dotted translation key path"""
        if not key_path or not key_path.strip():
            return False, "Key path cannot be empty"

        # Empty segments come from leading, trailing or doubled dots
        if any(not segment for segment in key_path.strip().split('.')):
            return False, f"Key path has an empty segment: {key_path!r}"

        return True, ""

    @staticmethod
    def sanitize_filename(filename: str) -> str:
        """Sanitize filename for safe storage"""
        # Remove invalid characters for file systems
        sanitized = re.sub(r'[<>:"/\\|?*]', '_', filename)

        # Limit length
        if len(sanitized) > 100:
            name, ext = sanitized.rsplit('.', 1) if '.' in sanitized else (sanitized, '')
            sanitized = name[:95] + ('.' + ext if ext else '')

        return sanitized or 'unnamed'

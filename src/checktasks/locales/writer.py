"""
Locale file serialization
"""

import logging
from pathlib import Path
from typing import Union

import yaml

from checktasks.models.locale import LocaleTree
from checktasks.utils.validators import InputValidator

logger = logging.getLogger(__name__)


def dump_locale(tree: LocaleTree) -> str:
    """Render a locale tree as block-style YAML"""
    return yaml.safe_dump(
        tree,
        allow_unicode=True,
        sort_keys=False,
        default_flow_style=False,
    )


def write_locale_file(tree: LocaleTree, language: str, output_dir: Union[str, Path] = '.') -> Path:
    """Write the tree to `<language>.yml` in output_dir, replacing any existing file"""
    output_path = Path(output_dir) / InputValidator.sanitize_filename(f"{language}.yml")
    with open(output_path, 'w', encoding='utf-8') as f:
        f.write(dump_locale(tree))

    logger.info(f"Wrote locale file {output_path}")
    return output_path

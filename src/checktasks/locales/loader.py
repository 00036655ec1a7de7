"""
Locale file discovery and parsing
"""

import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Union

import yaml

from checktasks.exceptions import LocaleDirectoryNotFoundError, LocaleParseError
from checktasks.locales.flattener import flatten_keys
from checktasks.models.locale import LocaleDirectoryGroup, LocaleTree

logger = logging.getLogger(__name__)


class LocaleLoader(yaml.SafeLoader):
    """SafeLoader that keeps yes/no/on/off as strings"""


LocaleLoader.yaml_implicit_resolvers = {
    first: [(tag, regexp) for tag, regexp in resolvers if tag != 'tag:yaml.org,2002:bool']
    for first, resolvers in yaml.SafeLoader.yaml_implicit_resolvers.items()
}


def _stringify_keys(node: Any) -> Any:
    """Locale keys are always strings, e.g. `404:` becomes '404'"""
    if isinstance(node, dict):
        return {str(key): _stringify_keys(value) for key, value in node.items()}
    return node


def arrange_locales(directories: Sequence[Union[str, Path]], reference_file: str = 'en.yml') -> Dict[str, LocaleDirectoryGroup]:
    """
    Group the locale files of each directory

    Args:
        directories: Locale directories (not searched recursively)
        reference_file: File name suffix identifying the reference locale

    Returns:
        Mapping of directory to its LocaleDirectoryGroup
    """
    groups: Dict[str, LocaleDirectoryGroup] = {}
    for locale_dir in directories:
        path = Path(locale_dir)
        if not path.is_dir():
            raise LocaleDirectoryNotFoundError(f"Locale directory not found: {locale_dir}")

        group = LocaleDirectoryGroup(directory=str(locale_dir))
        for locale in path.glob('*.yml'):
            if locale.name.endswith(reference_file):
                group.reference = str(locale)
            else:
                group.others.append(str(locale))

        logger.debug(f"Arranged {locale_dir}: reference={group.reference}, {len(group.others)} other locales")
        groups[str(locale_dir)] = group
    return groups


def load_locale_file(path: Union[str, Path]) -> LocaleTree:
    """Parse a YAML locale file into a mapping"""
    try:
        with open(path, 'r', encoding='utf-8') as f:
            data = yaml.load(f, Loader=LocaleLoader)
    except yaml.YAMLError as e:
        raise LocaleParseError(f"Failed to parse locale file {path}: {e}") from e

    if not isinstance(data, dict):
        raise LocaleParseError(f"Locale file is not a mapping: {path}")
    return _stringify_keys(data)


def unwrap_locale(tree: LocaleTree, expected_code: Optional[str] = None, source: str = '<locale>') -> LocaleTree:
    """
    Return the contents under the top-level locale code

    The expected code is looked up first; a file with a single top-level
    key is accepted under that key whatever its name.
    """
    if expected_code is not None and expected_code in tree:
        contents: Any = tree[expected_code]
    elif len(tree) == 1:
        code, contents = next(iter(tree.items()))
        if expected_code is not None:
            logger.warning(f"{source}: top-level key {code!r} does not match expected locale {expected_code!r}")
    else:
        raise LocaleParseError(
            f"{source}: expected a single top-level locale key, found {sorted(map(str, tree.keys()))}"
        )

    if contents is None:
        return {}
    if not isinstance(contents, dict):
        raise LocaleParseError(f"{source}: locale contents are not a mapping")
    return contents


def locale_code(path: Union[str, Path]) -> str:
    """Locale code from a file name, e.g. 'fr' for 'config/locales/devise.fr.yml'"""
    return Path(path).stem.rsplit('.', 1)[-1]


def load_keys(path: Union[str, Path]) -> List[str]:
    """Load a locale file and flatten its contents into dotted key paths"""
    tree = load_locale_file(path)
    return flatten_keys(unwrap_locale(tree, locale_code(path), source=str(path)))

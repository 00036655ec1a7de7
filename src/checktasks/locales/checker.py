"""
Locale completeness checker
"""

import logging
from pathlib import Path
from typing import Dict, List, Sequence, Union

from checktasks.exceptions import MissingReferenceLocaleError
from checktasks.locales.loader import arrange_locales, load_keys
from checktasks.models.locale import IssueSet, LocaleDirectoryGroup

logger = logging.getLogger(__name__)


def compare_locales(reference_keys: Sequence[str], other_keys: Sequence[str]) -> List[str]:
    """
    Keys present in exactly one of the two locales

    Stale keys (only in the other locale) come first, then missing keys.
    """
    reference_set = set(reference_keys)
    other_set = set(other_keys)

    difference: List[str] = []
    seen = set()
    for key in list(other_keys) + list(reference_keys):
        if key in seen:
            continue
        seen.add(key)
        if (key in other_set) != (key in reference_set):
            difference.append(key)
    return difference


class Locales:
    """Checks that every locale in each directory has the reference locale's keys"""

    def __init__(self, directories: Sequence[Union[str, Path]], missing_reference: str = 'skip', reference_file: str = 'en.yml'):
        if missing_reference not in ('skip', 'error'):
            raise ValueError("missing_reference must be 'skip' or 'error'")

        self.directories = list(directories)
        self.missing_reference = missing_reference
        self.reference_file = reference_file
        self.issues: IssueSet = {}
        self.locales: Dict[str, LocaleDirectoryGroup] = arrange_locales(self.directories, reference_file)

    def check(self) -> IssueSet:
        """Compare every other locale against its directory's reference locale"""
        self.issues = {}
        for directory, group in self.locales.items():
            if not group.has_reference:
                if self.missing_reference == 'error':
                    raise MissingReferenceLocaleError(f"No {self.reference_file} found in {directory}")
                logger.warning(f"No {self.reference_file} found in {directory}, skipping")
                continue

            reference_keys = load_keys(group.reference)
            logger.info(f"Checking {len(group.others)} locales in {directory} against {len(reference_keys)} reference keys")

            for other in group.others:
                difference = compare_locales(reference_keys, load_keys(other))
                if not difference:
                    continue

                logger.debug(f"{other}: {len(difference)} keys differ")
                self.issues[other] = difference
        return self.issues

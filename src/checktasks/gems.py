"""
Duplicate installed gem version checker
"""

import glob
import logging
from typing import Dict, List, Tuple

from checktasks.models.gem import GemVersion

logger = logging.getLogger(__name__)


def parse_gem_path(gem_path: str) -> Tuple[str, str]:
    """Get (name, version) from a gem directory path"""
    gem = GemVersion.from_path(gem_path)
    return gem.name, gem.version


class Gems:
    """Finds gems installed in more than one version"""

    def __init__(self, path: str):
        self.path = path
        self.gems: Dict[str, List[str]] = {}
        self.issues: Dict[str, List[str]] = {}

    def check(self) -> Dict[str, List[str]]:
        """Group installed versions by gem name and keep names with duplicates"""
        self.gems = {}
        for gem_path in sorted(glob.glob(self.path)):
            try:
                name, version = parse_gem_path(gem_path)
            except ValueError as e:
                logger.warning(f"Skipping {gem_path}: {e}")
                continue

            if name not in self.gems:
                self.gems[name] = []
            self.gems[name].append(version)

        self.issues = {name: versions for name, versions in self.gems.items() if len(versions) > 1}
        logger.info(f"Checked {len(self.gems)} gems, {len(self.issues)} with duplicate versions")
        return self.issues

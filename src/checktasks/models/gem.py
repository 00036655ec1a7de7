"""
Installed gem data model
"""

import os
from dataclasses import dataclass


@dataclass
class GemVersion:
    """A single installed gem directory"""
    name: str
    version: str
    path: str

    @classmethod
    def from_path(cls, gem_path: str) -> 'GemVersion':
        """Parse `<name>-<version>[-java]` from the last path component"""
        parts = os.path.basename(os.path.normpath(gem_path)).split('-')
        if len(parts) < 2:
            raise ValueError(f"Not a gem directory name: {gem_path}")

        if parts[-1] == 'java' and len(parts) >= 3:
            name, version = parts[:-2], parts[-2]
        else:
            name, version = parts[:-1], parts[-1]

        return cls(name='-'.join(name), version=version, path=gem_path)

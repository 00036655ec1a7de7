"""
Reports check results
"""

import json
import logging
import sys
from typing import Any, Dict, Optional, Protocol, TextIO

logger = logging.getLogger(__name__)


class Checker(Protocol):
    issues: Dict[str, Any]

    def check(self) -> Dict[str, Any]:
        ...


def run_check(checker: Checker, out: Optional[TextIO] = None, err: Optional[TextIO] = None) -> int:
    """
    Run a checker and report its issues

    Returns:
        0 when no issues were found, 1 otherwise
    """
    out = out or sys.stdout
    err = err or sys.stderr

    issues = checker.check()
    if len(issues) == 0:
        print('No issues found!', file=out)
        return 0

    logger.info(f"{type(checker).__name__} found {len(issues)} issues")
    print(json.dumps(issues, indent=2, ensure_ascii=False), file=err)
    return 1

# SPDX-License-Identifier: GPL-2.0-only

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from .errors import SuiteReadError

__all__ = ['SuiteSource', 'SuiteStatus', 'SuiteResult']


@dataclass(frozen=True)
class SuiteSource:
    """The text of one suite file and where it came from."""
    path: Path
    text: str

    @classmethod
    def read(cls, path) -> 'SuiteSource':
        path = Path(path)
        try:
            text = path.read_text(encoding='utf-8')
        except (OSError, UnicodeDecodeError) as e:
            raise SuiteReadError(path, e) from e
        return cls(path, text)


class SuiteStatus(Enum):
    """Outcome of processing one suite"""
    PASSED = "passed"
    ERROR = "error"
    COMPILE_FAILED = "compile failed"
    TESTS_FAILED = "tests failed"
    RUN_FAILED = "run failed"


@dataclass
class SuiteResult:
    suite: Path
    status: SuiteStatus
    reason: str = ''
    returncode: Optional[int] = None
    elapsed: float = 0.0

    @property
    def ok(self) -> bool:
        return self.status is SuiteStatus.PASSED

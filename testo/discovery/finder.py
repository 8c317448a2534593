# SPDX-License-Identifier: GPL-2.0-only

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Test discovery

Finds test entry points in suite text. This is line-oriented pattern matching,
not a C++ parser: a line declares a test when it contains the ``void`` marker
followed by whitespace and an identifier starting with ``test_``. Anything
after the identifier (parameter list, braces, comments) is ignored.
"""

import re
import warnings
from collections import Counter
from typing import List, Optional

from testo.core.errors import LineTooLongError, DuplicateTestWarning

__all__ = ['TEST_PATTERN', 'MAX_LINE_LENGTH', 'TestFinder', 'discover']

TEST_PATTERN = re.compile(r'(?<!\w)void[ \t]+(test_\w+)', re.ASCII)

# Lines longer than this are rejected instead of being split or truncated.
MAX_LINE_LENGTH = 64 * 1024


class TestFinder(object):
    def __init__(self, pattern=TEST_PATTERN, max_line_length=MAX_LINE_LENGTH):
        self.pattern = pattern
        self.max_line_length = max_line_length

    def find(self, text: str, path=None) -> List[str]:
        tests = []
        for lineno, line in enumerate(text.split('\n'), start=1):
            line = line.rstrip('\r')
            if len(line) > self.max_line_length:
                raise LineTooLongError(path or '<text>', lineno, self.max_line_length)
            m = self.pattern.search(line)
            if m is not None:
                tests.append(m.group(1))
        return tests


def duplicates(tests: List[str]) -> List[str]:
    return [name for name, count in Counter(tests).items() if count > 1]


def discover(text: str, path: Optional[str] = None) -> List[str]:
    """
    Return the test identifiers declared in ``text``, in file order.

    Duplicates are kept, so a name declared twice is run twice; a
    DuplicateTestWarning is issued for each repeated name.
    """
    tests = TestFinder().find(text, path)
    for name in duplicates(tests):
        warnings.warn(f'{path or "<text>"}: test {name} is declared more than once', DuplicateTestWarning, stacklevel=2)
    return tests

# SPDX-License-Identifier: GPL-2.0-only

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import glob
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

__all__ = ['HarnessConfig', 'DEFAULT_COMPILER']

DEFAULT_COMPILER = 'clang++'


@dataclass
class HarnessConfig:
    """Toolchain and layout settings for one invocation.

    Built once from the command line and handed to the orchestrator; nothing
    else in the package reads the environment or keeps settings of its own.
    """
    compiler: str = DEFAULT_COMPILER
    cxxflags: List[str] = field(default_factory=list)
    ldflags: List[str] = field(default_factory=list)
    testdir: str = 'test'
    objdir: str = 'build'
    objects: List[str] = field(default_factory=list)
    verbose: bool = False

    runner_name: str = 'test_runner'
    runner_suffix: str = '_runner.cpp'
    suite_pattern: str = 'test_*.cpp'
    object_pattern: str = '*.o'

    def __post_init__(self):
        if not self.compiler:
            raise ValueError('A compiler must be configured.')
        if not self.runner_name:
            raise ValueError('The runner executable needs a name.')
        self.cxxflags = list(self.cxxflags)
        self.ldflags = list(self.ldflags)
        self.objects = list(self.objects)

    @classmethod
    def from_flags(cls, compiler: Optional[str] = None, cxxflags: Optional[str] = None,
                   ldflags: Optional[str] = None, **kwargs) -> 'HarnessConfig':
        """Build a config from space-separated flag strings, falling back to $CXX, $CXXFLAGS and $LDFLAGS."""
        if compiler is None:
            compiler = os.environ.get('CXX') or DEFAULT_COMPILER
        if cxxflags is None:
            cxxflags = os.environ.get('CXXFLAGS', '')
        if ldflags is None:
            ldflags = os.environ.get('LDFLAGS', '')
        return cls(compiler=compiler, cxxflags=cxxflags.split(), ldflags=ldflags.split(), **kwargs)

    def link_objects(self) -> List[str]:
        # Explicit objects keep their order, globbed ones follow sorted.
        found = sorted(glob.glob(os.path.join(self.objdir, self.object_pattern)))
        return self.objects + found

    def find_suites(self) -> List[str]:
        # A killed run can leave a generated runner behind; it is not a suite.
        found = glob.glob(os.path.join(self.testdir, self.suite_pattern))
        return sorted(p for p in found if not p.endswith(self.runner_suffix))

    def runner_path(self) -> Path:
        return Path(self.runner_name).resolve()

    def generated_path(self, suite) -> Path:
        return Path(str(suite) + self.runner_suffix)

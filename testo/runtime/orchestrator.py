# SPDX-License-Identifier: GPL-2.0-only

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""
Suite orchestration

Each suite goes through discovery, synthesis, compilation and a run of the
resulting executable, strictly one suite at a time. The compiler and the
runner inherit stdout and stderr, so their diagnostics reach the terminal
untouched; only exit codes are inspected.

The generated source (``<suite>_runner.cpp``) and the runner executable are
removed after every suite, whatever the outcome.
"""

import shlex
import subprocess
import sys
import time
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, List, Optional

from testo.core.config import HarnessConfig
from testo.core.errors import TestoError, SuiteWriteError
from testo.core.suite import SuiteSource, SuiteResult, SuiteStatus
from testo.discovery.finder import discover
from testo.runtime.synthesize import RunnerSynthesizer

__all__ = ['SuiteOrchestrator', 'run_suites', 'TESTS_FAILED_EXIT']

# What a generated runner returns when at least one check failed.
TESTS_FAILED_EXIT = 1


def _remove(path: Path):
    try:
        path.unlink()
    except (FileNotFoundError, NotADirectoryError):
        pass


@contextmanager
def generated_artifacts(source_path: Path, runner_path: Path):
    """Yield the generated source and runner paths, removing both on exit."""
    try:
        yield source_path, runner_path
    finally:
        _remove(source_path)
        _remove(runner_path)


class SuiteOrchestrator:
    def __init__(self, config: HarnessConfig, synthesizer: Optional[RunnerSynthesizer] = None):
        self.config = config
        self.synthesizer = synthesizer or RunnerSynthesizer()
        self.objects = config.link_objects()
        self.results: List[SuiteResult] = []

    @property
    def failures(self) -> int:
        return sum(1 for result in self.results if not result.ok)

    def compile_command(self, source_path: Path, runner_path: Path) -> List[str]:
        cmd = [self.config.compiler]
        cmd.extend(self.config.cxxflags)
        cmd.extend(['-o', str(runner_path), str(source_path)])
        cmd.extend(self.objects)
        cmd.extend(self.config.ldflags)
        return cmd

    def _call(self, cmd: List[str]) -> int:
        if self.config.verbose:
            print(shlex.join(cmd))
        sys.stdout.flush()
        return subprocess.run(cmd).returncode

    def write_program(self, suite: SuiteSource, source_path: Path):
        tests = discover(suite.text, str(suite.path))
        program = self.synthesizer.synthesize(suite, tests)
        try:
            with open(source_path, 'w', encoding='utf-8') as f:
                f.write(program.render())
        except OSError as e:
            raise SuiteWriteError(source_path, e) from e

    def _execute(self, path: Path) -> SuiteResult:
        try:
            suite = SuiteSource.read(path)
        except TestoError as e:
            return SuiteResult(path, SuiteStatus.ERROR, str(e))

        source_path = self.config.generated_path(path)
        runner_path = self.config.runner_path()
        with generated_artifacts(source_path, runner_path):
            try:
                self.write_program(suite, source_path)
            except TestoError as e:
                return SuiteResult(path, SuiteStatus.ERROR, str(e))

            print("Running", path, flush=True)

            try:
                code = self._call(self.compile_command(source_path, runner_path))
            except OSError as e:
                return SuiteResult(path, SuiteStatus.COMPILE_FAILED, f'Cannot run {self.config.compiler}: {e}')
            if code != 0:
                return SuiteResult(path, SuiteStatus.COMPILE_FAILED,
                                   f'{self.config.compiler} exited with status {code}', code)

            try:
                code = self._call([str(runner_path)])
            except OSError as e:
                return SuiteResult(path, SuiteStatus.RUN_FAILED, f'Cannot run {runner_path}: {e}')

        if code == 0:
            return SuiteResult(path, SuiteStatus.PASSED, returncode=0)
        if code == TESTS_FAILED_EXIT:
            return SuiteResult(path, SuiteStatus.TESTS_FAILED, 'Some checks failed', code)
        if code < 0:
            return SuiteResult(path, SuiteStatus.RUN_FAILED, f'Runner killed by signal {-code}', code)
        return SuiteResult(path, SuiteStatus.RUN_FAILED, f'Runner exited with status {code}', code)

    def run_suite(self, path) -> SuiteResult:
        """Process one suite and add its result to the tally."""
        path = Path(path)
        start = time.monotonic()
        result = self._execute(path)
        result.elapsed = time.monotonic() - start
        self.results.append(result)
        if not result.ok:
            print(f"Suite failed: {result.reason}", file=sys.stderr)
        return result

    def run(self, suites: Iterable) -> int:
        for suite in suites:
            self.run_suite(suite)
        return self.failures


def run_suites(config: HarnessConfig, suites: Optional[Iterable] = None) -> int:
    """Run ``suites`` (default: every suite under the test directory) and return the failure count."""
    if suites is None:
        suites = config.find_suites()
    return SuiteOrchestrator(config).run(suites)

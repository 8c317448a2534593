# SPDX-License-Identifier: GPL-2.0-only

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from testo.runtime.orchestrator import SuiteOrchestrator
from testo.runtime.report import format_summary
from .common import add_suite_args, add_toolchain_args, config_from_args

__all__ = ['make_handle_run']


def make_handle_run(cmd_parsers):
    cmd = cmd_parsers.add_parser('run', help='build and run every test suite')
    add_suite_args(cmd)
    add_toolchain_args(cmd)
    cmd.add_argument('objects', nargs='*', metavar='OBJECT', help='additional object files to link into each runner')

    def handle(args, command):
        if command != 'run':
            return None
        config = config_from_args(args)
        orchestrator = SuiteOrchestrator(config)
        failures = orchestrator.run(config.find_suites())
        print()
        print(format_summary(orchestrator.results))
        return failures

    return handle

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import sys

from tabulate import tabulate

from testo.core.errors import TestoError
from testo.core.suite import SuiteSource
from testo.discovery.finder import discover
from .common import add_suite_args, config_from_args

__all__ = ['make_handle_list']


def make_handle_list(cmd_parsers):
    cmd = cmd_parsers.add_parser('list', help='list the tests found in every suite')
    add_suite_args(cmd)

    def handle(args, command):
        if command != 'list':
            return None
        config = config_from_args(args)
        rows = []
        errors = 0
        for path in config.find_suites():
            try:
                tests = discover(SuiteSource.read(path).text, path)
            except TestoError as e:
                print(f'Error: {e}', file=sys.stderr)
                errors += 1
                continue
            rows.append((path, len(tests), ', '.join(tests)))
        print(tabulate(rows, headers=['Suite', 'Tests', 'Names']))
        return errors

    return handle

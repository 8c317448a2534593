# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import sys

from testo.core.errors import TestoError, SuiteWriteError
from testo.core.suite import SuiteSource
from testo.discovery.finder import discover
from testo.runtime.synthesize import RunnerSynthesizer

__all__ = ['make_handle_generate']


def make_handle_generate(cmd_parsers):
    cmd = cmd_parsers.add_parser('generate', help='print the runner program generated for one suite')
    cmd.add_argument('suite', help='suite file to generate a runner for')
    cmd.add_argument('-o', '--output', default=None, help='write the program here instead of stdout')

    def handle(args, command):
        if command != 'generate':
            return None
        try:
            suite = SuiteSource.read(args.suite)
            program = RunnerSynthesizer().synthesize(suite, discover(suite.text, args.suite))
        except TestoError as e:
            print(f'Error: {e}', file=sys.stderr)
            return 1
        if args.output is None:
            sys.stdout.write(program.render())
            return 0
        try:
            with open(args.output, 'w', encoding='utf-8') as f:
                f.write(program.render())
        except OSError as e:
            print(f'Error: {SuiteWriteError(args.output, e)}', file=sys.stderr)
            return 1
        print(f'Generated runner for {args.suite}: {args.output}')
        return 0

    return handle

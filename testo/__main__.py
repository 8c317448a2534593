#!/usr/bin/env python
# PYTHON_ARGCOMPLETE_OK

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from testo.cli import *

from jinja2 import TemplateError
import argparse
import argcomplete
import sys

# Exit statuses wrap at 256, so a large tally must not read as success.
MAX_EXIT_STATUS = 255


def main(argv=None):
    parser = argparse.ArgumentParser('testo', description='Generate, build and run C++ test suites.')

    cmd_parsers = parser.add_subparsers(title='command', dest='command')
    cmd_parsers.required = True

    handlers = []
    handlers.append(make_handle_run(cmd_parsers))
    handlers.append(make_handle_list(cmd_parsers))
    handlers.append(make_handle_generate(cmd_parsers))

    argcomplete.autocomplete(parser)
    if argv is None:
        argv = sys.argv[1:]
    args = parser.parse_args(join_flag_values(argv))

    try:
        for handler in handlers:
            code = handler(args, args.command)
            if code is not None:
                return min(code, MAX_EXIT_STATUS)
    except (TemplateError, FileNotFoundError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == '__main__':
    sys.exit(main())

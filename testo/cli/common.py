# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import argparse

from testo.core.config import HarnessConfig

__all__ = ['add_suite_args', 'add_toolchain_args', 'config_from_args', 'join_flag_values', 'FLAG_VALUE_OPTIONS']


def add_suite_args(cmd):
    cmd.add_argument('--testdir', default='test', help='location of test files (default: %(default)s)')


def add_toolchain_args(cmd):
    cmd.add_argument('--cxx', default=None, help='the C++ compiler/linker (default: $CXX or clang++)')
    cmd.add_argument('--cxxflags', default=None, help='space-separated flags for compilation (default: $CXXFLAGS)')
    cmd.add_argument('--ldflags', default=None, help='space-separated flags for linking (default: $LDFLAGS)')
    cmd.add_argument('--objdir', default='build', help='location of object files (default: %(default)s)')
    cmd.add_argument('-v', '--verbose', action='store_true', help='print commands before running them')


def config_from_args(args: argparse.Namespace) -> HarnessConfig:
    return HarnessConfig.from_flags(
        compiler=getattr(args, 'cxx', None),
        cxxflags=getattr(args, 'cxxflags', None),
        ldflags=getattr(args, 'ldflags', None),
        testdir=args.testdir,
        objdir=getattr(args, 'objdir', 'build'),
        objects=getattr(args, 'objects', []),
        verbose=getattr(args, 'verbose', False),
    )


# Options whose values are flag strings and so usually start with '-'.
FLAG_VALUE_OPTIONS = ('--cxxflags', '--ldflags')


def join_flag_values(argv):
    """Rewrite ``--cxxflags -O2`` as ``--cxxflags=-O2`` so argparse takes the value."""
    joined = []
    i = 0
    while i < len(argv):
        arg = argv[i]
        if arg == '--':
            joined.extend(argv[i:])
            break
        if arg in FLAG_VALUE_OPTIONS and i + 1 < len(argv):
            joined.append(f'{arg}={argv[i + 1]}')
            i += 2
            continue
        joined.append(arg)
        i += 1
    return joined

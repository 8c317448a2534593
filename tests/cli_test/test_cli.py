# SPDX-License-Identifier: GPL-2.0-only

#!/usr/bin/env python3
# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

import sys
import os
import io
import subprocess
import tempfile
import unittest
from contextlib import redirect_stdout, redirect_stderr
from pathlib import Path
from unittest import mock

# Add the project root to Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
sys.path.insert(0, project_root)

from testo.__main__ import main, MAX_EXIT_STATUS
from testo.cli.common import join_flag_values


class TestCommandLine(unittest.TestCase):

    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = Path(self.tmp.name)
        self.testdir = self.root / 'test'
        self.testdir.mkdir()
        (self.testdir / 'test_math.cpp').write_text(
            'void test_add(Testo &t){ t.Assert(1 + 1 == 2, "add"); }\n'
            'void test_sub(Testo &t){ t.Assert(1 - 1 == 0, "sub"); }\n')
        (self.testdir / 'test_empty.cpp').write_text('// nothing yet\n')

    def tearDown(self):
        self.tmp.cleanup()

    def invoke(self, argv):
        out, err = io.StringIO(), io.StringIO()
        with redirect_stdout(out), redirect_stderr(err):
            code = main(argv)
        return code, out.getvalue(), err.getvalue()

    def test_command_required(self):
        with redirect_stderr(io.StringIO()):
            with self.assertRaises(SystemExit) as ctx:
                main([])
        self.assertNotEqual(ctx.exception.code, 0)

    def test_list(self):
        code, out, err = self.invoke(['list', '--testdir', str(self.testdir)])
        self.assertEqual(code, 0)
        self.assertIn('test_add, test_sub', out)
        self.assertIn('test_empty.cpp', out)
        self.assertLess(out.index('test_empty.cpp'), out.index('test_math.cpp'))

    def test_generate_to_stdout(self):
        code, out, err = self.invoke(['generate', str(self.testdir / 'test_math.cpp')])
        self.assertEqual(code, 0)
        self.assertIn('std::make_tuple(std::string("test_add"), test_add),', out)
        self.assertIn('int main(', out)

    def test_generate_to_file(self):
        target = self.root / 'runner.cpp'
        code, out, err = self.invoke(['generate', str(self.testdir / 'test_math.cpp'), '-o', str(target)])
        self.assertEqual(code, 0)
        self.assertIn('test_sub', target.read_text())

    def test_generate_missing_suite(self):
        code, out, err = self.invoke(['generate', str(self.testdir / 'test_gone.cpp')])
        self.assertEqual(code, 1)
        self.assertIn('Error: Failed to read', err)

    def test_run(self):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append(list(cmd))
            if cmd[0] == 'fake++':
                Path(cmd[cmd.index('-o') + 1]).write_text('')
                return subprocess.CompletedProcess(cmd, 1 if 'test_math' in cmd[cmd.index('-o') + 2] else 0)
            return subprocess.CompletedProcess(cmd, 0)

        with mock.patch('testo.runtime.orchestrator.subprocess.run', side_effect=fake_run):
            code, out, err = self.invoke([
                'run', '--testdir', str(self.testdir), '--cxx', 'fake++',
                '--cxxflags', '-O0 -g', '--ldflags', '-lm',
                '--objdir', str(self.root / 'build'), 'extra.o',
            ])
        self.assertEqual(code, 1)
        compile_cmd = calls[0]
        self.assertEqual(compile_cmd[:4], ['fake++', '-O0', '-g', '-o'])
        self.assertEqual(compile_cmd[-2:], ['extra.o', '-lm'])
        self.assertIn('1 of 2 suites failed', out)
        self.assertIn('Suite failed:', err)

    def test_flag_values_starting_with_dash(self):
        calls = []

        def fake_run(cmd, **kwargs):
            calls.append(list(cmd))
            if cmd[0] == 'fake++':
                Path(cmd[cmd.index('-o') + 1]).write_text('')
            return subprocess.CompletedProcess(cmd, 0)

        with mock.patch('testo.runtime.orchestrator.subprocess.run', side_effect=fake_run):
            code, out, err = self.invoke([
                'run', '--testdir', str(self.testdir), '--cxx', 'fake++',
                '--cxxflags', '-std=c++11', '--ldflags', '-lm',
                '--objdir', str(self.root / 'build'),
            ])
        self.assertEqual(code, 0)
        self.assertEqual(calls[0][:3], ['fake++', '-std=c++11', '-o'])
        self.assertEqual(calls[0][-1], '-lm')

    def test_ldflags_value_is_a_single_flag(self):
        with mock.patch('testo.runtime.orchestrator.subprocess.run') as run:
            code, out, err = self.invoke(['run', '--testdir', str(self.root / 'nonexistent'), '--ldflags', '-lm'])
        self.assertEqual(code, 0)
        run.assert_not_called()
        self.assertIn('No test suites found.', out)

    def test_join_flag_values(self):
        self.assertEqual(join_flag_values(['run', '--cxxflags', '-O2 -g', '--ldflags', '-lm', 'a.o']),
                         ['run', '--cxxflags=-O2 -g', '--ldflags=-lm', 'a.o'])
        self.assertEqual(join_flag_values(['run', '--ldflags=-lm']), ['run', '--ldflags=-lm'])
        self.assertEqual(join_flag_values(['run', '--ldflags']), ['run', '--ldflags'])
        self.assertEqual(join_flag_values(['run', '--', '--cxxflags', '-x']), ['run', '--', '--cxxflags', '-x'])

    def test_generate_to_unwritable_path(self):
        target = self.root / 'test' / 'test_math.cpp' / 'runner.cpp'
        code, out, err = self.invoke(['generate', str(self.testdir / 'test_math.cpp'), '-o', str(target)])
        self.assertEqual(code, 1)
        self.assertIn('Error: Failed to write', err)

    def test_exit_status_is_clamped(self):
        orchestrator = mock.Mock()
        orchestrator.run.return_value = 300
        orchestrator.results = []
        with mock.patch('testo.cli.run.SuiteOrchestrator', return_value=orchestrator):
            code, out, err = self.invoke(['run', '--testdir', str(self.testdir)])
        self.assertEqual(code, MAX_EXIT_STATUS)


if __name__ == '__main__':
    unittest.main()

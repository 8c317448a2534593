# SPDX-License-Identifier: GPL-2.0-only

"""
Runner synthesis - suite source to a self-contained C++ test runner

The generated program is assembled from four sections:

- preamble: includes and the ``Testo`` test context with its ``Assert`` check
- source: the suite text, verbatim
- table: one ``(name, function)`` entry per discovered test, in discovery order
- entry point: ``main``, which runs every table entry and prints the summary

The table is the only place discovered names meet the user's code. Each name
is emitted as a function reference and trusted to denote a
``void name(Testo &)`` defined in the source; when it does not, the compiler
reports it, not the synthesizer.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence

from jinja2 import Environment, FileSystemLoader, select_autoescape

from testo.core.suite import SuiteSource

__all__ = ['GeneratedProgram', 'RunnerSynthesizer', 'synthesize', 'TEMPLATE_DIR']

TEMPLATE_DIR = Path(__file__).parent.absolute() / "templates"


@dataclass(frozen=True)
class GeneratedProgram:
    """A generated runner, kept as its sections until serialized"""
    preamble: str
    source: str
    table: str
    entry_point: str

    def sections(self) -> List[str]:
        source = self.source
        if source and not source.endswith('\n'):
            source += '\n'
        return [self.preamble, source, self.table, self.entry_point]

    def render(self) -> str:
        return ''.join(self.sections())

    def __str__(self):
        return self.render()


class RunnerSynthesizer:
    """
    Fills the runner templates for one suite at a time.

    Synthesis does no I/O beyond loading templates, and the output depends
    only on the suite and the test list.
    """

    def __init__(self, template_dir: Path = TEMPLATE_DIR):
        self.jinja_env = self._setup_jinja_environment(Path(template_dir))

    def _setup_jinja_environment(self, template_dir: Path) -> Environment:
        if not template_dir.exists():
            raise FileNotFoundError(f"Template directory not found: {template_dir}")

        env = Environment(
            loader=FileSystemLoader(str(template_dir)),
            autoescape=select_autoescape(['html', 'xml']),
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True
        )
        return env

    def _render(self, name: str, **template_vars) -> str:
        template = self.jinja_env.get_template(name)
        return template.render(**template_vars)

    def synthesize(self, suite: SuiteSource, tests: Sequence[str]) -> GeneratedProgram:
        tests = list(tests)
        return GeneratedProgram(
            preamble=self._render('preamble.cpp.j2', suite_name=suite.path.as_posix()),
            # Never goes through Jinja, so braces in user code are left alone.
            source=suite.text,
            table=self._render('table.cpp.j2', tests=tests),
            entry_point=self._render('main.cpp.j2'),
        )


def synthesize(suite: SuiteSource, tests: Sequence[str]) -> str:
    """Return the runner program text for ``suite`` with ``tests`` in the test table."""
    return RunnerSynthesizer().synthesize(suite, tests).render()

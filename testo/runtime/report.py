# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from typing import Sequence

from humanfriendly import format_timespan
from humanfriendly.text import pluralize
from tabulate import tabulate

from testo.core.suite import SuiteResult

__all__ = ['format_summary']


def format_summary(results: Sequence[SuiteResult]) -> str:
    if not results:
        return 'No test suites found.'
    rows = [(str(r.suite), r.status.value, r.reason or '-', format_timespan(r.elapsed))
            for r in results]
    table = tabulate(rows, headers=['Suite', 'Result', 'Reason', 'Time'])
    failed = sum(1 for r in results if not r.ok)
    if failed:
        total = f'{failed} of {pluralize(len(results), "suite")} failed'
    else:
        total = f'{pluralize(len(results), "suite")} passed'
    return f'{table}\n\n{total}'

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

__all__ = ['TestoError', 'SuiteReadError', 'LineTooLongError', 'SuiteWriteError', 'DuplicateTestWarning']


class TestoError(Exception):
    pass


class SuiteReadError(TestoError):
    def __init__(self, path, reason):
        super().__init__(f'Failed to read {str(path)!r}: {reason}')
        self.path = path
        self.reason = reason


class LineTooLongError(SuiteReadError):
    def __init__(self, path, lineno, limit):
        super().__init__(path, f'line {lineno} is longer than {limit} characters')
        self.lineno = lineno
        self.limit = limit


class SuiteWriteError(TestoError):
    def __init__(self, path, reason):
        super().__init__(f'Failed to write {str(path)!r}: {reason}')
        self.path = path
        self.reason = reason


class DuplicateTestWarning(UserWarning):
    pass

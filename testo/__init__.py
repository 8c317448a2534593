# SPDX-License-Identifier: GPL-2.0-only

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

# testo - generate, build and run C++ test suites

# Configuration, suite model and errors
from .core import *

# Test discovery
from .discovery import *

# Runner synthesis and suite orchestration
from .runtime import *

__version__ = "1.0.0"

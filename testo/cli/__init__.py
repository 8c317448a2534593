# SPDX-License-Identifier: GPL-2.0-only

# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from .common import *
from .run import *
from .listing import *
from .generate import *

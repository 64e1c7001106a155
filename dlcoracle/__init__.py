#!/usr/bin/env python3

# Copyright (C) The dlcoracle developers
#
# This file is part of dlcoracle. It is subject to the license terms in the
# LICENSE file found in the top-level directory of this distribution.
#
# No part of dlcoracle including this file, may be copied, modified, propagated,
# or distributed except according to the terms contained in the LICENSE file.

"__init__ module for the dlcoracle package."

import logging

name = "dlcoracle"
__version__ = "2026.10.19"
__author__ = "The dlcoracle developers"
__author_email__ = "devs@dlcoracle.org"
__copyright__ = "Copyright (C) 2026 The dlcoracle developers"
__license__ = "MIT License"

# library: silent unless the application configures logging
logging.getLogger(__name__).addHandler(logging.NullHandler())

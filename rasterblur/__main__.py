# -*- coding: utf-8 -*-
"""Allow ``python -m rasterblur``."""

import sys

from rasterblur.cli import main

sys.exit(main())

# -*- coding: utf-8 -*-
"""`python -m thememanager`"""

from __future__ import annotations

from thememanager.main import main

raise SystemExit(main())

# -*- coding: utf-8 -*-
"""
Internal utilities (constants, config, exceptions, misc).

This subpackage is intentionally not a user-facing API surface.
Import what you need from concrete modules, for example:

    from gridpath.utils.exceptions import Unreachable
"""

from __future__ import annotations

from gridpath.utils.config import ParamConfig, DotConfig

# No public re-exports on purpose
__all__: list[str] = ["ParamConfig", "DotConfig"]

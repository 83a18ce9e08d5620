# Copyright (c) 2024 osfamily Contributors
# MIT License

"""osfamily release metadata."""

from __future__ import annotations

__version__ = "0.3.0"
__author__ = "osfamily Contributors"
__codename__ = "Compass"

# Version info tuple for programmatic comparison
VERSION_INFO = (0, 3, 0)

"""Pytest bootstrap so tests import the in-tree ``oldest`` package.

Running the bare ``pytest`` script from a checkout without ``pip install -e .``
leaves the repository root off ``sys.path``.
"""

from __future__ import annotations

import sys
from pathlib import Path


REPO_ROOT = str(Path(__file__).resolve().parent.parent)

if REPO_ROOT not in sys.path:
    sys.path.insert(0, REPO_ROOT)

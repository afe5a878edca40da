"""Test package initialisation.

Pytest loads individual test modules as part of the ``tests`` package.  The
project source (``modules`` and ``utils``) lives one directory level above this
package, so when the project is not installed the modules are not importable
by default.

We explicitly append the repository root to ``sys.path`` here so the tests run
the same way from a plain checkout as from an editable install.
"""

from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.append(str(ROOT))

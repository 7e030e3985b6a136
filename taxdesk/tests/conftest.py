"""
Test configuration for TaxDesk tests.

Puts the project root on sys.path so 'from taxdesk...' resolves whether pytest
runs from the project root or from taxdesk/ without an editable install.
"""
import sys
from pathlib import Path

_package_dir = Path(__file__).parent.parent        # .../taxdesk/
_project_root = _package_dir.parent               # .../

if str(_project_root) not in sys.path:
    sys.path.insert(0, str(_project_root))

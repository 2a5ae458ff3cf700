"""
Pytest configuration for space3 tests.
Adds the src directory to sys.path so that test imports work without an install.
"""
import sys
from pathlib import Path

# Add src to the path so imports like 'from space3.mathutils import ...' work
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

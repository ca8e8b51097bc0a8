"""Root conftest — adds the repository root to path for test imports."""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent))

import sys
from pathlib import Path

# Add the repo root to Python path so tests run without an install
repo_root = Path(__file__).resolve().parent
if str(repo_root) not in sys.path:
    sys.path.insert(0, str(repo_root))

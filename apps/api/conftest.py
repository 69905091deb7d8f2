import os
import sys
import tempfile
from pathlib import Path

from dotenv import load_dotenv

# Add project root and packages to python path for tests
ROOT_DIR = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT_DIR))
sys.path.insert(0, str(ROOT_DIR / "packages"))

# Keep test runs out of the repo's data directory
os.environ["FLOWSCRIPT_DATA_DIR"] = tempfile.mkdtemp(prefix="flowscripts-test-")

load_dotenv(dotenv_path=Path(__file__).resolve().parent / ".env")

from pathlib import Path
import sys

root_dir = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(root_dir))

"""
So that `python -m jet program.jet` works the same as `jet program.jet`.
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from jet.cmdline import main

main()

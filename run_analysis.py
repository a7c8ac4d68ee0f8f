# run_analysis.py
import os
import sys

# Add the project root to the Python path to ensure imports work correctly
project_root = os.path.dirname(os.path.abspath(__file__))
if project_root not in sys.path:
    sys.path.insert(0, project_root)

from uavflight.cli import main

if __name__ == "__main__":
    sys.exit(main())

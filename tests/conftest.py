import sys
import os

# Let test modules in subdirectories import the shared samples table
tests_dir = os.path.dirname(os.path.abspath(__file__))
if tests_dir not in sys.path:
    sys.path.insert(0, tests_dir)

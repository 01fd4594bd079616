"""Shared pytest setup for the Solace test suite."""

import os
import sys

# Add the project root to sys.path so 'solace' is importable without installing
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

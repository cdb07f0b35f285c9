#!/usr/bin/env python3
"""Convenience script to run a documentation server.

Usage:
    python run_doc_server.py
    DOC_SERVER_CATALOG=ibso-patterns python run_doc_server.py
"""

import sys
from pathlib import Path

# Add src to path
sys.path.insert(0, str(Path(__file__).parent / "src"))

from doc_server.main import main


if __name__ == "__main__":
    main()

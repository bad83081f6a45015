"""Main entry point: run the CV extractor from a source checkout."""
import sys

from talent.cli import main

if __name__ == "__main__":
    sys.exit(main())

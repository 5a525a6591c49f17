"""Run the export from command line: python -m event_export [config.yaml]"""
import sys

from event_export.pipeline import main

if __name__ == "__main__":
    sys.exit(main())

"""Export approved events from Airtable to events.json. Usage: python run_export.py [config.yaml]"""
import sys
from pathlib import Path

root = Path(__file__).resolve().parent
sys.path.insert(0, str(root / "src"))

from event_export.pipeline import main

if __name__ == "__main__":
    sys.exit(main())

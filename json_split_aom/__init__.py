"""Core logic for json-split-aom.

Splits a JSON array of objects into one file per element. The command line
lives in `cli.py` and the Gradio UI in `app.py`. This package contains:
- dot-path parsing and lookup
- per-element serialization and file naming
- the splitting driver shared by both front ends
"""

__version__ = "0.3.0"

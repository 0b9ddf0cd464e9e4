"""Core logic for JSON Tabulator.

The Gradio UI lives in `app.py` and the command line in `cli.py`. This
package contains pure functions that:
- navigate into a JSON document along skip steps
- flatten nested values into path/value records
- lay records out as a sorted-column table
"""

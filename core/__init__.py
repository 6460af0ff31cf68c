"""Core (UI-agnostic) project tracker logic.

This package contains:
- header normalization and date helpers
- sheet stores (in-memory and XLSX via openpyxl)
- record mapping (sheet rows -> keyed records)
- filter options, summary stats and month queries (JSON-serializable payloads)
- cell/status/row mutations
"""

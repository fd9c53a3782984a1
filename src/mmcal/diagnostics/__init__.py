"""Diagnostics package.

- round_trip, year_table: always available, stdlib only
- watat_barcode: needs the diagnostics extras (numpy, matplotlib)
"""

__all__ = ["round_trip", "year_table", "watat_barcode"]

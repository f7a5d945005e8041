"""Diagnostics package.

Light-weight checks and tables; the plotting tools need the optional
matplotlib extra (pip install "solarhijri[diagnostics]").
"""

__all__ = ["round_trip", "nowruz_table", "leap_barcode", "nowruz_scatter"]

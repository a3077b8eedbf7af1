"""
CSV export module
"""

from .csv_writer import CSV_HEADER, CsvWriter, output_filename

__all__ = ["CSV_HEADER", "CsvWriter", "output_filename"]

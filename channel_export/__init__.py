"""
Channel Export
Exports the video catalogue of a YouTube channel to CSV.
"""

__version__ = "0.1.0"

"""
Core services for Channel Export
"""

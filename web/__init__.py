"""
Web interface for the listing valuation engine.
"""

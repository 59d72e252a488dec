"""
API package for the Max Profit Analyzer.
"""

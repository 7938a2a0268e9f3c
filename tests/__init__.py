"""
Cross-app test suite for the portfolio contact API.
"""

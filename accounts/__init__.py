"""
Admin accounts: the site owner's login for the submissions dashboard.
"""

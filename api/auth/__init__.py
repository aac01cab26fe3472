"""
User accounts and bearer-token auth.
"""

"""
Companies: persistence, schemas and endpoints.
"""

"""
Jobs: persistence, schemas and endpoints.
"""

"""
Local product feed client for development and demos.
"""

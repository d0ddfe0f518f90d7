"""
Unit tests for monolog-factory, laid out like the source package.
"""

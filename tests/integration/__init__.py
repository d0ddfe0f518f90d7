"""
Integration tests: resolve a configuration from disk and build loggers from it.
"""

"""
Shared utilities (console output and logging).
"""

"""Test package for TinyChat.

Structure:
    - unit/: Individual function and class tests
    - integration/: Components working together, HTTP app and live server
"""

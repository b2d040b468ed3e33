"""Test suite for jsonsalvage.

This package contains unit and integration tests for the extraction core,
the parsing helper, the JSON-mode agent wrapper, the CLI and the HTTP server.
Each test owns its setup and I/O is replaced at the boundaries.
"""

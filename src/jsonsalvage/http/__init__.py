"""HTTP package for the jsonsalvage server.

Route logic lives in the modules of this package; server.py only wires the
routes to a FastAPI application.
"""

"""
API module.

FastAPI application factory, routers, dependency wiring and the auth gate.
"""

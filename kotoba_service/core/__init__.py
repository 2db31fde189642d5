"""
Core plumbing for the kotoba service: settings, logging, middleware,
exception handling and FastAPI dependencies.
"""

"""
API Layer - FastAPI application and dependency wiring.
"""

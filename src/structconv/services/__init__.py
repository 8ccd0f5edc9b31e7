"""Service layer — public decode entry points.

Services may import from domain, engine, and infrastructure layers.
They must never import from commands or output.
"""

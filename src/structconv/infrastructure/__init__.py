"""Infrastructure layer — acquisition of raw key/value data.

This layer depends on stdlib only (os, urllib).
It must never import from domain, engine, services, commands, or output.
The service layer bridges between sources and the binding engine.
"""

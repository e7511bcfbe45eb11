"""
HTTP layer.

``router`` aggregates the routers defined in ``endpoints``, one module
per entity.
"""

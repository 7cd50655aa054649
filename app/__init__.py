"""Real-estate marketplace backend.

Layers: ``domain`` (entities), ``application`` (use cases), ``infrastructure``
(database, repositories, push delivery) and ``interfaces`` (HTTP API).
"""

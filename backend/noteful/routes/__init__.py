# Routes package init
"""
Noteful Backend — API Routes Package
======================================

Route Inventory:
    - folders.py: /api/folders, /api/folders/{id}   (folders CRUD)
    - notes.py:   /api/notes, /api/notes/{id}       (notes CRUD)
    - health.py:  GET /health                       (service health check)

Design Principle:
    Routes are THIN: they turn the request into a dict, call the service,
    and pick the status code and headers. Business rules live in services.
"""

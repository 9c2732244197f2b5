# Routes package init
"""
QuickNote Backend: API Routes Package
========================================

Route Inventory:
    - notes.py:   POST/GET /api/notes, GET/PUT/DELETE /api/notes/{id}
    - health.py:  GET /health

Routes are thin: they extract request data, call NoteService, and return
records. Status codes for failures come from the global exception handlers.
"""

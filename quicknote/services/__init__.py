# Services package init
"""
QuickNote Backend: Services Layer
====================================

Service Inventory:
    - validation:        Ordered validation + sanitization pipeline (pure)
    - note_store:        NoteStore interface (abstract)
    - sql_note_store:    SqlAlchemyNoteStore, the production store
    - memory_note_store: InMemoryNoteStore, used by tests
    - note_service:      NoteService, sequencing validate → store → outcome
"""

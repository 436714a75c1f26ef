# Schemas package init
"""
Noteful Backend — Request/Response Schemas
============================================

Schema Inventory:
    - common.py: error envelope and health payload
    - folder.py: FolderCreate / FolderUpdate / FolderResponse
    - note.py:   NoteCreate / NoteUpdate / NoteResponse
"""

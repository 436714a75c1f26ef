# Services package init
"""
Noteful Backend — Services Layer
==================================

What:  Business logic layer sitting between routes (HTTP) and repositories (SQL).
How:   Services accept plain request dicts, apply validation and sanitization,
       call the repositories, and return response schemas.

Service Inventory:
    - validation:     required-field and partial-update rules
    - sanitizer:      XSS escaping (plain text) and allow-list cleaning (rich text)
    - FolderService:  folders CRUD
    - NoteService:    notes CRUD
"""

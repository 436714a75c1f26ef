"""
Noteful Backend — HTML Sanitizer
==================================

What:  Neutralizes XSS payloads in user-supplied text fields.
How:   Pure functions. Rich text goes through `bleach.clean` with explicit
       allow-lists; plain text only has its angle brackets escaped.
Who:   FolderService and NoteService, on the write path (before the row is
       stored) and on the read path (before every response).

Two policies:

    sanitize_text        folder_name, note_name
        No tags allowed. Every tag is escaped, so
            Naughty <script>alert("xss");</script>
        becomes
            Naughty &lt;script&gt;alert("xss");&lt;/script&gt;
        Quotes and ampersands are left alone, so "Tom & Jerry" is stored
        and served exactly as submitted.

    sanitize_rich_text   note_content
        Inline markup from ALLOWED_TAGS survives, attributes outside
        ALLOWED_ATTRIBUTES are dropped. Event handlers (onerror, onclick,
        onload, ...) are never allow-listed, so
            <img src="x.png" onerror="alert(1)"> <strong>ok</strong>
        becomes
            <img src="x.png"> <strong>ok</strong>
        Tags outside the list are escaped like in sanitize_text.

Both functions are idempotent, so running a stored value through the read
path again does not double-escape it: sanitize_text output holds no angle
brackets, and bleach keeps existing character entities.
"""

from typing import Optional

import bleach

# Inline/block markup a note body may carry
ALLOWED_TAGS = frozenset({
    "a", "abbr", "b", "blockquote", "br", "code", "em", "i", "img",
    "li", "ol", "p", "pre", "s", "strong", "sub", "sup", "u", "ul",
})

ALLOWED_ATTRIBUTES = {
    "a": ["href", "title", "target"],
    "abbr": ["title"],
    "img": ["src", "alt", "title", "width", "height"],
}

# javascript: and data: URLs are rejected in href/src
ALLOWED_PROTOCOLS = frozenset({"http", "https", "mailto"})

# Plain-text fields: only the characters that can open or close a tag
TAG_ESCAPES = str.maketrans({"<": "&lt;", ">": "&gt;"})


def sanitize_text(value: Optional[str]) -> Optional[str]:
    """Escape all markup in a plain-text field; `&` and quotes are kept as typed."""
    if value is None:
        return None
    return value.translate(TAG_ESCAPES)


def sanitize_rich_text(value: Optional[str]) -> Optional[str]:
    """Keep allow-listed markup, strip every other attribute, escape every other tag."""
    if value is None:
        return None
    return bleach.clean(
        value,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=False,
        strip_comments=True,
    )

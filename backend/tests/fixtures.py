"""
Fixture builders shared by the endpoint tests.

Rows are plain dicts shaped like the API representation, so they can be
inserted straight into the tables and compared against response bodies.
"""

from typing import Any, Dict, List


def make_folders_array() -> List[Dict[str, Any]]:
    return [
        {"id": 1, "folder_name": "folder1"},
        {"id": 2, "folder_name": "folder2"},
        {"id": 3, "folder_name": "folder3"},
        {"id": 4, "folder_name": "folder4"},
    ]


def make_malicious_folder() -> Dict[str, Dict[str, Any]]:
    malicious_folder = {
        "id": 911,
        "folder_name": 'Naughty naughty very naughty <script>alert("xss");</script>',
    }
    expected_folder = {
        **malicious_folder,
        "folder_name": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
    }
    return {"malicious_folder": malicious_folder, "expected_folder": expected_folder}


def make_notes_array() -> List[Dict[str, Any]]:
    return [
        {"id": 1, "note_name": "note1", "note_content": "content1", "folder_id": 1},
        {"id": 2, "note_name": "note2", "note_content": "content2", "folder_id": 2},
        {"id": 3, "note_name": "note3", "note_content": "content3", "folder_id": 3},
        {"id": 4, "note_name": "note4", "note_content": "content4", "folder_id": 4},
    ]


def make_malicious_note() -> Dict[str, Dict[str, Any]]:
    malicious_note = {
        "id": 911,
        "note_name": 'Naughty naughty very naughty <script>alert("xss");</script>',
        "note_content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist" '
            'onerror="alert(document.cookie);">. But not <strong>all</strong> bad.'
        ),
    }
    expected_note = {
        **malicious_note,
        "note_name": 'Naughty naughty very naughty &lt;script&gt;alert("xss");&lt;/script&gt;',
        "note_content": (
            'Bad image <img src="https://url.to.file.which/does-not.exist">. '
            "But not <strong>all</strong> bad."
        ),
    }
    return {"malicious_note": malicious_note, "expected_note": expected_note}


def without_modified(note: Dict[str, Any]) -> Dict[str, Any]:
    """Notes carry a server-side timestamp; compare everything else exactly."""
    return {key: value for key, value in note.items() if key != "modified"}

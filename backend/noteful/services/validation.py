"""
Noteful Backend — Request Body Validation
===========================================

What:  Required-field rules for create and partial-update requests.
How:   Pure functions over plain dicts (``model.model_dump()``); failures
       raise ValidationError, which the global handler turns into a 400.
When:  Before any statement is sent to the database, so an invalid request
       never causes a partial write.

A value counts as supplied when it is neither None nor a blank string
("" or whitespace only).
"""

from typing import Any, Dict, Iterable, Mapping

from noteful.exceptions import ValidationError


def is_supplied(value: Any) -> bool:
    if isinstance(value, str):
        return bool(value.strip())
    return value is not None


def require_fields(body: Mapping[str, Any], fields: Iterable[str]) -> None:
    """
    Raise for the first field, in declared order, that is missing from `body`.

    Example:
        require_fields({"note_content": "x"}, ("note_name", "note_content"))
        → ValidationError("Missing 'note_name' in request body")
    """
    for field in fields:
        if not is_supplied(body.get(field)):
            raise ValidationError(
                message=f"Missing '{field}' in request body",
                field=field,
            )


def supplied_fields(body: Mapping[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """
    The entries of `body` named in `fields` that carry a value.

    Fields outside `fields` are ignored, which is how PATCH bodies drop
    unrecognized keys.
    """
    return {
        field: body[field]
        for field in fields
        if field in body and is_supplied(body[field])
    }


def require_any_field(
    body: Mapping[str, Any],
    fields: Iterable[str],
    message: str,
) -> Dict[str, Any]:
    """Return the supplied subset of `fields`; raise `message` if it is empty."""
    fields = tuple(fields)
    supplied = supplied_fields(body, fields)
    if not supplied:
        raise ValidationError(message=message, context={"fields": list(fields)})
    return supplied


def merge_patch(current: Mapping[str, Any], patch: Mapping[str, Any]) -> Dict[str, Any]:
    """Copy of `current` with the keys present in `patch` overwritten."""
    merged = dict(current)
    merged.update(patch)
    return merged

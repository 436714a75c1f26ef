"""
Noteful Backend — Note Service Unit Tests
===========================================

What:  Tests for NoteService business logic (list, get, create, update, delete).
How:   The repository is patched with AsyncMocks; no database involved.

What we test:
    ✅ Create: validation runs before the repository, values are sanitized
    ✅ Create: SQLAlchemy failures become DatabaseError
    ✅ Update: existence check first, then field check
    ✅ Update: modified refreshed by default, explicit value wins
    ✅ Delete: zero affected rows is a NotFoundError
"""

from datetime import datetime, timedelta, timezone
from types import SimpleNamespace
from unittest.mock import AsyncMock, patch

import pytest
from sqlalchemy.exc import IntegrityError, OperationalError

from noteful.exceptions import DatabaseError, NotFoundError, ValidationError
from noteful.services.note_service import NoteService, as_utc


def make_note(**overrides):
    fields = {
        "id": 1,
        "note_name": "note1",
        "note_content": "content1",
        "folder_id": 1,
        "modified": datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
    }
    fields.update(overrides)
    return SimpleNamespace(**fields)


class TestNoteServiceCreate:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_create_note_success(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.insert = AsyncMock(return_value=make_note(id=7))

            result = await self.service.create_note(
                mock_db_session,
                {"note_name": "note1", "note_content": "content1", "folder_id": 1},
            )

            assert result.id == 7
            assert result.note_name == "note1"
            mock_repo.insert.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_note_sanitizes_before_insert(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.insert = AsyncMock(return_value=make_note())

            await self.service.create_note(
                mock_db_session,
                {
                    "note_name": "<script>x</script>",
                    "note_content": '<b onclick="x()">hi</b>',
                    "folder_id": 1,
                },
            )

            values = mock_repo.insert.await_args.args[1]
            assert values["note_name"] == "&lt;script&gt;x&lt;/script&gt;"
            assert values["note_content"] == "<b>hi</b>"
            assert values["modified"].tzinfo is not None

    @pytest.mark.asyncio
    async def test_missing_field_never_reaches_repository(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.insert = AsyncMock()

            with pytest.raises(ValidationError, match="Missing 'note_content'"):
                await self.service.create_note(
                    mock_db_session, {"note_name": "a", "folder_id": 1}
                )

            mock_repo.insert.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_foreign_key_violation_becomes_database_error(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.insert = AsyncMock(
                side_effect=IntegrityError("INSERT", {}, Exception("FOREIGN KEY constraint failed"))
            )

            with pytest.raises(DatabaseError) as exc_info:
                await self.service.create_note(
                    mock_db_session,
                    {"note_name": "a", "note_content": "b", "folder_id": 99},
                )

            assert exc_info.value.context["folder_id"] == 99


class TestNoteServiceUpdate:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_unknown_note_is_404_before_body_check(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.get = AsyncMock(return_value=None)
            mock_repo.update = AsyncMock()

            with pytest.raises(NotFoundError):
                await self.service.update_note(mock_db_session, 123, {})

            mock_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_no_patchable_fields_is_validation_error(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.get = AsyncMock(return_value=make_note())
            mock_repo.update = AsyncMock()

            with pytest.raises(ValidationError) as exc_info:
                await self.service.update_note(mock_db_session, 1, {"note_name": ""})

            assert exc_info.value.message == (
                "Request body must contain either 'note_name' or 'note_content'"
            )
            mock_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"modified": datetime(2021, 1, 1, tzinfo=timezone.utc)},
            {"folder_id": 3},
        ],
    )
    async def test_folder_or_modified_alone_is_rejected(self, mock_db_session, payload):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.get = AsyncMock(return_value=make_note())
            mock_repo.update = AsyncMock()

            with pytest.raises(ValidationError):
                await self.service.update_note(mock_db_session, 1, payload)

            mock_repo.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_folder_id_applied_alongside_content(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.get = AsyncMock(return_value=make_note())
            mock_repo.update = AsyncMock(return_value=1)

            await self.service.update_note(
                mock_db_session, 1, {"note_content": "moved", "folder_id": 3}
            )

            values = mock_repo.update.await_args.args[2]
            assert values["folder_id"] == 3
            assert values["note_content"] == "moved"

    @pytest.mark.asyncio
    async def test_modified_is_refreshed(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.get = AsyncMock(return_value=make_note())
            mock_repo.update = AsyncMock(return_value=1)
            before = datetime.now(timezone.utc)

            await self.service.update_note(mock_db_session, 1, {"note_content": "new"})

            values = mock_repo.update.await_args.args[2]
            assert values["note_content"] == "new"
            assert "note_name" not in values
            assert values["modified"] >= before

    @pytest.mark.asyncio
    async def test_explicit_modified_wins(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.get = AsyncMock(return_value=make_note())
            mock_repo.update = AsyncMock(return_value=1)
            explicit = datetime(2021, 3, 4, 5, 6, 7)

            await self.service.update_note(
                mock_db_session, 1, {"note_name": "x", "modified": explicit}
            )

            values = mock_repo.update.await_args.args[2]
            assert values["modified"] == explicit.replace(tzinfo=timezone.utc)

    @pytest.mark.asyncio
    async def test_database_failure_is_wrapped(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.get = AsyncMock(return_value=make_note())
            mock_repo.update = AsyncMock(
                side_effect=OperationalError("UPDATE", {}, Exception("database is locked"))
            )

            with pytest.raises(DatabaseError):
                await self.service.update_note(mock_db_session, 1, {"note_name": "x"})


class TestNoteServiceReadDelete:

    def setup_method(self):
        self.service = NoteService()

    @pytest.mark.asyncio
    async def test_get_note_sanitizes_on_read(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.get = AsyncMock(return_value=make_note(note_name="<i>raw</i>"))

            result = await self.service.get_note(mock_db_session, 1)

            assert result.note_name == "&lt;i&gt;raw&lt;/i&gt;"

    @pytest.mark.asyncio
    async def test_list_notes(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.all = AsyncMock(return_value=[make_note(id=1), make_note(id=2)])

            result = await self.service.list_notes(mock_db_session)

            assert [note.id for note in result] == [1, 2]

    @pytest.mark.asyncio
    async def test_delete_missing_note_raises_not_found(self, mock_db_session):
        with patch('noteful.services.note_service.note_repository') as mock_repo:
            mock_repo.delete = AsyncMock(return_value=0)

            with pytest.raises(NotFoundError) as exc_info:
                await self.service.delete_note(mock_db_session, 42)

            assert exc_info.value.message == "Note doesn't exist"


class TestAsUtc:

    def test_naive_value_is_taken_as_utc(self):
        assert as_utc(datetime(2021, 1, 1, 12, 0)) == datetime(2021, 1, 1, 12, 0, tzinfo=timezone.utc)

    def test_offset_value_is_converted(self):
        plus_two = timezone(timedelta(hours=2))

        result = as_utc(datetime(2021, 1, 1, 14, 0, tzinfo=plus_two))

        assert result == datetime(2021, 1, 1, 12, 0, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc

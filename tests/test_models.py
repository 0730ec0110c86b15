"""Tests for database primitives and row models."""

import sqlite3
from datetime import datetime, timezone

import pytest

from config.exceptions import DatabaseError
from models.chapter import Beat, Chapter
from models.novel import Novel, Part

NOW = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def _novel(novel_id="n1", user_id="alice", **extra) -> Novel:
    return Novel(id=novel_id, user_id=user_id, title="Novel", created_at=NOW, updated_at=NOW, **extra)


class TestSchema:
    def test_tables_created(self, db):
        rows = db._conn.execute("SELECT name FROM sqlite_master WHERE type = 'table'").fetchall()
        names = {r["name"] for r in rows}
        assert {"novels", "novel_parts", "novel_chapters", "novel_beats"} <= names

    def test_reopen_is_idempotent(self, db, tmp_db_path):
        from models.database import Database
        db.insert("novels", _novel().to_row())
        again = Database(tmp_db_path)
        try:
            assert len(again.select("novels")) == 1
        finally:
            again.close()


class TestPrimitives:
    def test_insert_returns_stored_row(self, db):
        row = db.insert("novels", _novel(genre="Fantasy").to_row())
        assert row["id"] == "n1"
        assert row["genre"] == "Fantasy"
        assert row["created_at"] == NOW.isoformat()

    def test_select_conjunction(self, db):
        db.insert("novels", _novel("n1", "alice").to_row())
        db.insert("novels", _novel("n2", "bob").to_row())

        assert len(db.select("novels")) == 2
        assert [r["id"] for r in db.select("novels", user_id="bob")] == ["n2"]
        assert db.select("novels", id="n1", user_id="bob") == []

    def test_select_none_matches_null(self, db):
        db.insert("novel_chapters", Chapter(id="c1", novel_id="n1", created_at=NOW, updated_at=NOW).to_row())
        db.insert("novel_chapters", Chapter(id="c2", novel_id="n1", part_id="p1", created_at=NOW, updated_at=NOW).to_row())

        assert [r["id"] for r in db.select("novel_chapters", part_id=None)] == ["c1"]

    def test_update_returns_updated_rows(self, db):
        db.insert("novels", _novel().to_row())
        rows = db.update("novels", {"title": "Renamed"}, id="n1")
        assert len(rows) == 1
        assert rows[0]["title"] == "Renamed"

    def test_update_without_match_returns_empty(self, db):
        assert db.update("novels", {"title": "Ghost"}, id="missing") == []

    def test_update_without_values_raises(self, db):
        with pytest.raises(DatabaseError):
            db.update("novels", {}, id="n1")

    def test_delete_returns_rowcount(self, db):
        for i in range(3):
            db.insert("novel_beats", Beat(id=f"b{i}", novel_id="n1", chapter_id="c1",
                                          description="x", created_at=NOW).to_row())
        assert db.delete("novel_beats", chapter_id="c1") == 3
        assert db.select("novel_beats") == []

    def test_delete_without_predicate_refused(self, db):
        with pytest.raises(DatabaseError):
            db.delete("novel_beats")

    def test_unknown_table_rejected(self, db):
        with pytest.raises(DatabaseError, match="Unknown table"):
            db.select("users")

    def test_unknown_column_rejected(self, db):
        with pytest.raises(DatabaseError, match="Unknown column"):
            db.select("novels", owner="alice")

    def test_engine_errors_propagate_untranslated(self, db):
        db.insert("novels", _novel().to_row())
        with pytest.raises(sqlite3.IntegrityError):
            db.insert("novels", _novel().to_row())

    def test_part_delete_leaves_chapter_reference(self, db):
        db.insert("novel_parts", Part(id="p1", novel_id="n1", created_at=NOW).to_row())
        db.insert("novel_chapters", Chapter(id="c1", novel_id="n1", part_id="p1", created_at=NOW, updated_at=NOW).to_row())

        db.delete("novel_parts", id="p1")
        assert db.select("novel_chapters", id="c1")[0]["part_id"] == "p1"


class TestTransaction:
    def test_commit_on_success(self, db):
        with db.transaction():
            db.insert("novels", _novel("n1").to_row())
            db.insert("novels", _novel("n2").to_row())
        assert len(db.select("novels")) == 2

    def test_rollback_on_error(self, db):
        with pytest.raises(RuntimeError):
            with db.transaction():
                db.insert("novels", _novel("n1").to_row())
                raise RuntimeError("boom")
        assert db.select("novels") == []

    def test_nested_blocks_join_outer(self, db):
        with pytest.raises(RuntimeError):
            with db.transaction():
                with db.transaction():
                    db.insert("novels", _novel("n1").to_row())
                raise RuntimeError("after inner block")
        assert db.select("novels") == []


class TestRecords:
    def test_from_row_parses_timestamps(self, db):
        row = db.insert("novels", _novel().to_row())
        novel = Novel.from_row(row)
        assert novel.created_at == NOW
        assert isinstance(novel.updated_at, datetime)

    def test_to_dict_is_camel_case(self):
        chapter = Chapter(id="c1", novel_id="n1", pov_character="Paul", word_count_goal=3000,
                          created_at=NOW, updated_at=NOW)
        data = chapter.to_dict()
        assert data["povCharacter"] == "Paul"
        assert data["wordCountGoal"] == 3000
        assert data["novelId"] == "n1"
        assert data["createdAt"] == NOW.isoformat()

    def test_table_names(self):
        assert Novel.__table__ == "novels"
        assert Part.__table__ == "novel_parts"
        assert Chapter.__table__ == "novel_chapters"
        assert Beat.__table__ == "novel_beats"

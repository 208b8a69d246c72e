"""
Tests for coercion of foreign errors into StructuredError
"""

import sqlite3

import pytest

from user_error import StructuredError, coerce, codes


class TestStrings:

    def test_string_becomes_summary(self):
        err = coerce("Too cool for cats")
        assert err.summary == "Too cool for cats"
        assert err.reasons == []
        assert err.causes == []

    def test_empty_string_uses_default_summary(self, monkeypatch):
        monkeypatch.setattr("sys.argv", ["mytool"])
        assert coerce("").summary == "mytool encountered an unknown error."


class TestIOErrors:

    def test_disk_full_round_trip(self):
        err = StructuredError.from_error(OSError("disk full"))
        assert err.summary == "disk full"
        assert err.reasons == []
        assert err.causes == ["disk full"]
        assert err.render(color=False) == "Error: disk full\n"

    def test_errno_display_kept(self):
        err = coerce(FileNotFoundError(2, "No such file or directory", "main.db"))
        assert err.summary == "[Errno 2] No such file or directory: 'main.db'"

    def test_chain_becomes_reasons(self):
        try:
            try:
                raise PermissionError("access denied")
            except PermissionError as e:
                raise OSError("cannot write cache") from e
        except OSError as e:
            err = coerce(e)
        assert err.summary == "cannot write cache"
        assert err.reasons == ["access denied"]

    def test_causes_survive_edits(self):
        err = coerce(OSError("disk full"))
        err.update("Failed to save project")
        err.clear_reasons()
        assert err.causes == ["disk full"]


class TestSQLiteErrors:

    def test_operational_error(self):
        conn = sqlite3.connect(":memory:")
        try:
            with pytest.raises(sqlite3.OperationalError) as info:
                conn.execute("SELECT * FROM missing")
        finally:
            conn.close()

        err = coerce(info.value)
        assert err.summary == codes.SQLITE_SUMMARY
        assert err.reasons[0] == "The database operation could not be performed"
        assert err.reasons[1] == "no such table: missing"
        assert err.help_text == "Make sure the database schema has been created."
        assert err.causes == ["no such table: missing"]

    def test_integrity_error(self):
        conn = sqlite3.connect(":memory:")
        try:
            conn.execute("CREATE TABLE t (id INTEGER PRIMARY KEY)")
            conn.execute("INSERT INTO t VALUES (1)")
            with pytest.raises(sqlite3.IntegrityError) as info:
                conn.execute("INSERT INTO t VALUES (1)")
        finally:
            conn.close()

        err = coerce(info.value)
        assert err.summary == "SQLite has encountered an issue"
        assert err.reasons[0] == "A database constraint was violated"
        assert "UNIQUE constraint failed" in err.reasons[1]
        assert err.help_text is not None

    def test_programming_error_after_close(self):
        conn = sqlite3.connect(":memory:")
        conn.close()
        with pytest.raises(sqlite3.ProgrammingError) as info:
            conn.execute("SELECT 1")
        err = coerce(info.value)
        assert err.reasons[0] == "The SQL statement or its parameters are invalid"

    def test_hand_built_error(self):
        err = coerce(sqlite3.DatabaseError("file is not a database"))
        assert err.reasons[:2] == ["Underlying SQLite call failed", "file is not a database"]
        assert err.help_text is None

    def test_message_less_error(self):
        err = coerce(sqlite3.InterfaceError())
        assert err.reasons == ["The sqlite3 interface was used incorrectly"]
        assert err.causes == ["InterfaceError"]

    def test_warning(self):
        err = coerce(sqlite3.Warning("statement ignored"))
        assert err.reasons == ["SQLite issued a warning", "statement ignored"]


class TestGenericExceptions:

    def test_exception_with_chain(self):
        try:
            try:
                raise KeyError("token")
            except KeyError as e:
                raise RuntimeError("login failed") from e
        except RuntimeError as e:
            err = coerce(e)
        assert err.summary == "login failed"
        assert err.reasons == ["'token'"]
        assert err.causes == ["login failed"]

    def test_empty_message_uses_type_name(self):
        err = coerce(ValueError())
        assert err.summary == "ValueError"
        assert err.causes == ["ValueError"]

    def test_structured_error_is_copied(self):
        original = StructuredError.new("s").reason("r")
        err = coerce(original)
        assert err == original
        assert err is not original

    def test_unsupported_type(self):
        with pytest.raises(TypeError):
            coerce(42)

    def test_custom_registration(self):
        class Exploded(Exception):
            pass

        @coerce.register(Exploded)
        def _(value):
            return StructuredError.new("Kaboom").help("Stand back")

        assert coerce(Exploded()).render(color=False) == "Error: Kaboom\nStand back\n"

"""
Tests for the storage ports.

The in-memory ports are tested directly; the SQLite ports run against a
database file in ``tmp_path`` migrated with ``init_db``.
"""

import functools

import pytest

from resource_api.app.core.db import get_connection, init_db
from resource_api.app.entities.club import Club
from resource_api.app.entities.instance import Instance
from resource_api.app.repositories.base import ConstraintViolation, StorageError
from resource_api.app.repositories.memory import InMemoryCrudeRepository, InMemoryCrudRepository
from resource_api.app.repositories.sqlite import SqliteCrudeRepository, SqliteCrudRepository


class TestInMemoryRepository:
    def test_save_assigns_sequential_identifiers(self):
        repository = InMemoryCrudRepository()
        new_club = Club(name="A")

        first = repository.save(new_club)
        second = repository.save(Club(name="B"))

        assert (first.id, second.id) == (1, 2)
        # The caller's object is not modified.
        assert new_club.id is None

    def test_find_one_returns_a_copy(self):
        repository = InMemoryCrudRepository()
        saved = repository.save(Club(name="A"))

        found = repository.find_one(saved.id)
        found.name = "changed"

        assert repository.find_one(saved.id).name == "A"

    def test_find_one_missing_returns_none(self):
        assert InMemoryCrudRepository().find_one(42) is None

    def test_unique_field_violation(self):
        repository = InMemoryCrudRepository(unique_fields=("name",))
        repository.save(Club(name="A"))

        with pytest.raises(ConstraintViolation):
            repository.save(Club(name="A"))
        assert len(repository.find_all()) == 1

    def test_resaving_a_record_keeps_its_unique_value(self):
        repository = InMemoryCrudRepository(unique_fields=("name",))
        saved = repository.save(Club(name="A"))
        saved.email = "a@club.example"

        assert repository.save(saved).email == "a@club.example"

    def test_delete_is_permanent_and_repeatable(self):
        repository = InMemoryCrudRepository()
        saved = repository.save(Club(name="A"))

        repository.delete(saved)
        repository.delete(saved)

        assert repository.find_one(saved.id) is None
        assert repository.find_all() == []

    def test_find_all_enabled(self):
        repository = InMemoryCrudeRepository()
        repository.save(Instance(name="on", path="/on", enabled=True))
        repository.save(Instance(name="off", path="/off", enabled=False))

        assert [i.name for i in repository.find_all()] == ["on", "off"]
        assert [i.name for i in repository.find_all_enabled()] == ["on"]


@pytest.fixture
def database(tmp_path):
    path = str(tmp_path / "resources.db")
    init_db(path)
    return path


@pytest.fixture
def connection_factory(database):
    return functools.partial(get_connection, database)


class TestSqliteRepository:
    def test_init_db_is_idempotent(self, database):
        init_db(database)

        conn = get_connection(database)
        try:
            versions = [row["version"] for row in conn.execute("SELECT version FROM migrations")]
        finally:
            conn.close()
        assert versions == [1]

    def test_save_inserts_and_find_one_reads_back(self, connection_factory):
        repository = SqliteCrudRepository("clubs", Club, connection_factory)

        saved = repository.save(Club(name="A", email="a@club.example"))

        assert saved.id is not None
        assert repository.find_one(saved.id) == Club(id=saved.id, name="A", email="a@club.example")
        assert repository.find_one(saved.id + 100) is None

    @pytest.mark.parametrize("id", [2**63, -(2**63) - 1, 10**30])
    def test_find_one_outside_integer_range_returns_none(self, connection_factory, id):
        repository = SqliteCrudRepository("clubs", Club, connection_factory)
        repository.save(Club(name="A"))

        assert repository.find_one(id) is None

    def test_save_updates_existing_record(self, connection_factory):
        repository = SqliteCrudRepository("clubs", Club, connection_factory)
        saved = repository.save(Club(name="A"))

        saved.name = "B"
        updated = repository.save(saved)

        assert updated == Club(id=saved.id, name="B")
        assert len(repository.find_all()) == 1

    def test_save_with_unknown_identifier_inserts_it(self, connection_factory):
        repository = SqliteCrudRepository("clubs", Club, connection_factory)

        saved = repository.save(Club(id=7, name="A"))

        assert saved.id == 7
        assert repository.find_one(7).name == "A"

    def test_unique_name_raises_constraint_violation(self, connection_factory):
        repository = SqliteCrudRepository("clubs", Club, connection_factory)
        repository.save(Club(name="A"))

        with pytest.raises(ConstraintViolation):
            repository.save(Club(name="A"))
        assert [club.name for club in repository.find_all()] == ["A"]

    def test_other_failures_raise_storage_error(self, connection_factory):
        repository = SqliteCrudRepository("missing_table", Club, connection_factory)

        with pytest.raises(StorageError) as info:
            repository.find_all()
        assert not isinstance(info.value, ConstraintViolation)

    def test_delete(self, connection_factory):
        repository = SqliteCrudRepository("clubs", Club, connection_factory)
        first = repository.save(Club(name="A"))
        second = repository.save(Club(name="B"))

        repository.delete(first)

        assert repository.find_one(first.id) is None
        assert repository.find_all() == [second]

    def test_enabled_flag_round_trips_as_bool(self, connection_factory):
        repository = SqliteCrudeRepository("instances", Instance, connection_factory)
        on = repository.save(Instance(name="on", path="/on", enabled=True))
        off = repository.save(Instance(name="off", path="/off", enabled=False))

        assert repository.find_one(on.id).enabled is True
        assert repository.find_one(off.id).enabled is False
        assert repository.find_all_enabled() == [on]
        assert repository.find_all() == [on, off]

import pytest

import nexttalent.database as dbmod


class _Inspector:
    def __init__(self, names):
        self._names = names

    def get_table_names(self):
        return self._names


class _Meta:
    tables = {"profiles": object(), "notifications": object(), "applications": object()}

    def __init__(self):
        self.binds = []

    def create_all(self, bind):
        self.binds.append(bind)


def test_get_db_closes_session(monkeypatch):
    class _DB:
        def __init__(self):
            self.closed = False

        def close(self):
            self.closed = True

    inst = _DB()
    monkeypatch.setattr(dbmod, "SessionLocal", lambda: inst)
    gen = dbmod.get_db()
    assert next(gen) is inst
    with pytest.raises(StopIteration):
        next(gen)
    assert inst.closed is True


def test_init_db_success_and_failure(monkeypatch):
    meta = _Meta()
    monkeypatch.setattr(dbmod.Base, "metadata", meta)
    dbmod.init_db()
    assert meta.binds == [dbmod.engine]

    class _MetaFail:
        def create_all(self, bind):
            raise RuntimeError("db fail")

    monkeypatch.setattr(dbmod.Base, "metadata", _MetaFail())
    with pytest.raises(RuntimeError):
        dbmod.init_db()


def test_ensure_tables_exist_reports_only_missing(monkeypatch, caplog):
    caplog.set_level("INFO")
    monkeypatch.setattr(dbmod.Base, "metadata", _Meta())
    monkeypatch.setattr(dbmod, "inspect", lambda engine: _Inspector(["profiles"]))
    dbmod.ensure_tables_exist()
    assert "Created missing DB tables: applications, notifications" in caplog.text


def test_ensure_tables_exist_no_changes(monkeypatch, caplog):
    caplog.set_level("INFO")
    monkeypatch.setattr(dbmod.Base, "metadata", _Meta())
    monkeypatch.setattr(dbmod, "inspect", lambda engine: _Inspector(["profiles", "notifications", "applications"]))
    dbmod.ensure_tables_exist()
    assert "All DB tables already exist" in caplog.text



def test_sqlite_urls_allow_cross_thread_use():
    assert dbmod._engine_kwargs("sqlite://") == {"connect_args": {"check_same_thread": False}}


def test_server_databases_use_pre_ping():
    assert dbmod._engine_kwargs("postgresql://u:p@localhost/nexttalent") == {"pool_pre_ping": True}

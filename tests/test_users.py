import pytest

from gobangserver.users import DatabaseError, UserDatabase, UserInfo, default_db_path


@pytest.fixture
def database(tmp_path):
    with UserDatabase(tmp_path / "data" / "users.db") as db:
        yield db


def test_default_db_path_layout():
    path = default_db_path()
    assert path.name == "users.db"
    assert path.parent.name == "data"


def test_open_creates_directory_and_file(tmp_path):
    path = tmp_path / "nested" / "dir" / "users.db"
    db = UserDatabase(path).open()
    try:
        assert path.is_file()
        assert db.is_open
    finally:
        db.close()
    assert not db.is_open


def test_open_fails_when_parent_is_a_file(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(DatabaseError):
        UserDatabase(blocker / "users.db").open()


def test_add_user_then_duplicate(database):
    assert database.add_user("alice", "password") is True
    assert database.add_user("alice", "secret") is False


def test_user_exists(database):
    assert database.user_exists("bob") is False
    database.add_user("bob", "password")
    assert database.user_exists("bob") is True


def test_get_user_returns_stored_fields(database):
    database.add_user("carol", "password")
    info = database.get_user("carol")
    assert isinstance(info, UserInfo)
    assert info.name == "carol"
    assert info.password == "password"
    assert info.level == 1


def test_uids_are_distinct_and_increasing(database):
    database.add_user("a", "password")
    database.add_user("b", "password")
    first = database.get_user("a")
    second = database.get_user("b")
    assert second.uid > first.uid


def test_get_missing_user_is_none(database):
    assert database.get_user("nobody") is None


def test_duplicate_keeps_original_password(database):
    database.add_user("dave", "password")
    database.add_user("dave", "secret")
    assert database.get_user("dave").password == "password"


def test_data_persists_across_connections(tmp_path):
    path = tmp_path / "users.db"
    with UserDatabase(path) as db:
        db.add_user("erin", "password")
    with UserDatabase(path) as db:
        assert db.user_exists("erin") is True
        assert db.get_user("erin").name == "erin"


@pytest.mark.parametrize(
    ("method", "args"),
    [
        ("user_exists", ("x",)),
        ("add_user", ("x", "password")),
        ("get_user", ("x",)),
    ],
)
def test_closed_database_raises(tmp_path, method, args):
    path = tmp_path / "users.db"
    db = UserDatabase(path)
    with pytest.raises(DatabaseError):
        getattr(db, method)(*args)
    assert db.is_open is False
    assert not path.exists()


def test_context_manager_closes(tmp_path):
    with UserDatabase(tmp_path / "users.db") as db:
        assert db.is_open
    assert not db.is_open
    with pytest.raises(DatabaseError):
        db.get_user("x")
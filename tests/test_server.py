import socket

from gobangserver.server import build_parser, main


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.port == 3221
    assert args.host == "0.0.0.0"
    assert args.db is None


def test_parser_custom_values():
    args = build_parser().parse_args(["--host", "127.0.0.1", "--port", "8000", "--db", "x.db"])
    assert (args.host, args.port, args.db) == ("127.0.0.1", 8000, "x.db")


def test_main_fails_on_busy_port(tmp_path):
    db_path = tmp_path / "data" / "users.db"
    blocker = socket.socket(socket.AF_INET, socket.SOCK_STREAM)
    try:
        blocker.bind(("127.0.0.1", 0))
        blocker.listen(1)
        port = blocker.getsockname()[1]
        code = main(["--host", "127.0.0.1", "--port", str(port), "--db", str(db_path)])
    finally:
        blocker.close()
    assert code == 1
    assert db_path.is_file()


def test_main_fails_on_unusable_database(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    code = main(["--host", "127.0.0.1", "--port", "0", "--db", str(blocker / "users.db")])
    assert code == 1
    assert blocker.read_text() == "x"
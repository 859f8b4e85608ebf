from authentication.manage_credentials import main


def test_status_reports_pending_setup(store, capsys):
    assert main(["status", "E002"], repo=store) == 0
    out = capsys.readouterr().out
    assert "not set" in out
    assert "ALL" in out


def test_status_unknown_employee(store, capsys):
    assert main(["status", "NOPE"], repo=store) == 1


def test_setup_uses_same_rules(store, capsys):
    assert main(["setup", "E002", "123"], repo=store) == 1
    assert store.writes == 0

    assert main(["setup", "E002", "secret1"], repo=store) == 0
    assert store.writes == 1

    assert main(["setup", "E002", "secret2"], repo=store) == 1
    assert "already set" in capsys.readouterr().out

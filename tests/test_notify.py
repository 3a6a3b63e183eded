import sys
import types

from setdefaultapps.notify import notify


def test_notify_uses_plyer(monkeypatch):
    sent = []
    plyer = types.ModuleType("plyer")
    plyer.notification = types.SimpleNamespace(notify=lambda **kw: sent.append(kw))
    monkeypatch.setitem(sys.modules, "plyer", plyer)

    assert notify("Default Apps", "2 default app(s) updated.") is True
    assert sent == [{"title": "Default Apps", "message": "2 default app(s) updated.", "app_name": "Default Apps", "timeout": 5}]


def test_notify_never_raises(monkeypatch):
    def boom(**kw):
        raise RuntimeError("no backend")

    plyer = types.ModuleType("plyer")
    plyer.notification = types.SimpleNamespace(notify=boom)
    monkeypatch.setitem(sys.modules, "plyer", plyer)
    assert notify("t", "m") is False


def test_notify_as_user_runs_helper_in_user_session():
    from setdefaultapps.commands import CommandResult
    from setdefaultapps.notify import notify_as_user
    from setdefaultapps.system import ConsoleUser

    from conftest import FakeRunner

    fake = FakeRunner({(sys.executable,): CommandResult(0, "")})
    assert notify_as_user(ConsoleUser("jdoe", "501"), "Default Apps", "1 updated.", app_name="SetDefaultApps", runner=fake)
    argv = fake.raw_calls[0]
    assert argv[:6] == ("launchctl", "asuser", "501", "sudo", "-u", "jdoe")
    assert argv[6:] == (
        sys.executable, "-m", "setdefaultapps.notify",
        "--title", "Default Apps", "--message", "1 updated.", "--timeout", "5",
        "--app-name", "SetDefaultApps",
    )


def test_notify_as_user_failure_is_not_fatal():
    from setdefaultapps.commands import CommandResult
    from setdefaultapps.notify import notify_as_user
    from setdefaultapps.system import ConsoleUser

    from conftest import FakeRunner

    user = ConsoleUser("jdoe", "501")
    assert notify_as_user(user, "t", "m", runner=FakeRunner({(sys.executable,): CommandResult(1, "")})) is False
    assert notify_as_user(user, "t", "m", runner=FakeRunner({(sys.executable,): OSError("gone")})) is False


def test_helper_entry_point(monkeypatch):
    from setdefaultapps.notify import main

    sent = []
    plyer = types.ModuleType("plyer")
    plyer.notification = types.SimpleNamespace(notify=lambda **kw: sent.append(kw))
    monkeypatch.setitem(sys.modules, "plyer", plyer)

    assert main(["--title", "Default Apps", "--message", "done", "--app-name", "SetDefaultApps"]) == 0
    assert sent == [{"title": "Default Apps", "message": "done", "app_name": "SetDefaultApps", "timeout": 5}]

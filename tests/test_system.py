from setdefaultapps.system import ConsoleUser, gather_facts, get_console_user, parse_console_user

from conftest import FakeRunner

SCUTIL_OUT = """<dictionary> {
  GID : 20
  Name : jdoe
  UID : 501
}
"""


def test_parse_console_user():
    assert parse_console_user(SCUTIL_OUT) == "jdoe"
    assert parse_console_user(SCUTIL_OUT.replace("jdoe", "loginwindow")) == ""
    assert parse_console_user("") == ""


def test_get_console_user():
    fake = FakeRunner({("scutil",): SCUTIL_OUT, ("id", "-u", "jdoe"): "501\n"})
    user = get_console_user(fake)
    assert user == ConsoleUser(name="jdoe", uid="501")
    assert fake.inputs[0] == "show State:/Users/ConsoleUser\n"


def test_no_console_user_at_login_window():
    fake = FakeRunner({("scutil",): SCUTIL_OUT.replace("jdoe", "loginwindow")})
    assert get_console_user(fake) is None
    assert not fake.called("id")


def test_gather_facts_tolerates_failures():
    fake = FakeRunner({("/usr/bin/sw_vers", "-productName"): "macOS", ("/usr/bin/sw_vers", "-productVersion"): OSError("x")})
    facts = gather_facts(ConsoleUser("jdoe", "501"), fake)
    assert facts.macos_name == "macOS"
    assert facts.macos_version == ""


def test_user_prefix():
    assert ConsoleUser("jdoe", "501").as_user_prefix() == ["launchctl", "asuser", "501", "sudo", "-u", "jdoe"]

import subprocess

from setdefaultapps.commands import CommandResult
from setdefaultapps.utiluti import QueryStatus, Utiluti

from conftest import U, FakeRunner


def test_runs_as_console_user(make_utility):
    utility, fake = make_utility({(U, "url", "https"): "/Applications/Safari.app\n"})
    res = utility.get_url_default("https")
    assert res.is_found
    assert res.value == "/Applications/Safari.app"
    assert fake.raw_calls[0] == ("launchctl", "asuser", "501", "sudo", "-u", "jdoe", U, "url", "https")


def test_without_user_runs_directly():
    fake = FakeRunner()
    Utiluti(runner=fake).get_uti("pdf")
    assert fake.raw_calls == [(U, "get-uti", "pdf")]


def test_blank_and_marker_outputs_are_not_found(make_utility):
    utility, _ = make_utility(
        {
            (U, "url", "ftp"): "<no default app found>\n",
            (U, "get-uti", "xyz"): "null",
        }
    )
    assert utility.get_url_default("ftp").status is QueryStatus.NOT_FOUND
    assert utility.get_uti("xyz").status is QueryStatus.NOT_FOUND
    assert utility.get_uti("abc").status is QueryStatus.NOT_FOUND


def test_failures_are_errors_not_blanks(make_utility):
    utility, _ = make_utility(
        {
            (U, "app", "id"): CommandResult(1, "", "no such app"),
            (U, "type", "list"): subprocess.TimeoutExpired(cmd="utiluti", timeout=30),
            (U, "url", "list"): FileNotFoundError("utiluti"),
        }
    )
    res = utility.app_id("/Applications/Nope.app")
    assert res.is_error and res.reason == "no such app"

    res = utility.list_type_candidates("com.adobe.pdf")
    assert res.is_error and "timed out" in res.reason

    res = utility.list_url_candidates("https")
    assert res.is_error and "could not run" in res.reason


def test_set_commands_argv(make_utility):
    utility, fake = make_utility()
    utility.set_url_handler("mailto", "com.apple.mail")
    utility.set_type_handler("com.adobe.pdf", "com.apple.Preview")
    assert fake.calls == [
        (U, "url", "set", "mailto", "com.apple.mail"),
        (U, "type", "set", "com.adobe.pdf", "com.apple.Preview"),
    ]


def test_lines_skips_blank_lines(make_utility):
    utility, _ = make_utility({(U, "url", "list", "https"): "/Applications/A.app\n\n  /Applications/B.app  \n"})
    assert utility.list_url_candidates("https").lines() == ["/Applications/A.app", "/Applications/B.app"]

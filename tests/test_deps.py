import pytest

from setdefaultapps.deps import DependencyChecker, is_at_least, version_tuple
from setdefaultapps.errors import DependencyError

from conftest import FakeRunner

DIALOG = "/usr/local/bin/dialog"
UTILUTI = "/usr/local/bin/utiluti"
JAMF = "/usr/local/bin/jamf"


def test_version_compare():
    assert version_tuple("2.5.2.4777") == (2, 5, 2, 4777)
    assert is_at_least("2.5.0", "2.5.0")
    assert is_at_least("2.5.0", "2.5.2.4777")
    assert is_at_least("2.5.0", "3")
    assert not is_at_least("2.5.0", "2.4.9")
    assert not is_at_least("2.5.0", "")


class Machine:
    """Executables present on the fake Mac; Jamf triggers install into it."""

    def __init__(self, present=(), installs=None, dialog_version="2.5.2"):
        self.present = set(present)
        self.installs = installs or {}
        self.dialog_version = dialog_version
        self.runner = FakeRunner(
            {
                (DIALOG, "--version"): lambda argv: self.dialog_version,
                (JAMF, "policy", "-trigger"): self._trigger,
            }
        )
        self.checker = DependencyChecker(self.runner, is_executable=self.present.__contains__)

    def _trigger(self, argv):
        installed = self.installs.get(argv[-1])
        if installed:
            self.present.add(installed[0])
            if len(installed) > 1:
                self.dialog_version = installed[1]
        return ""

    def triggers(self):
        return [c[-1] for c in self.runner.calls if c[0] == JAMF]


def test_present_dialog_needs_no_trigger():
    m = Machine(present={DIALOG})
    assert m.checker.ensure_dialog(DIALOG, "installswiftDialog") == "2.5.2"
    assert m.triggers() == []


def test_missing_dialog_is_installed():
    m = Machine(installs={"installswiftDialog": (DIALOG,)})
    assert m.checker.ensure_dialog(DIALOG, "installswiftDialog") == "2.5.2"
    assert m.triggers() == ["installswiftDialog"]


def test_outdated_dialog_is_updated():
    m = Machine(present={DIALOG}, dialog_version="2.3.1", installs={"installswiftDialog": (DIALOG, "2.5.4")})
    assert m.checker.ensure_dialog(DIALOG, "installswiftDialog") == "2.5.4"
    assert m.triggers() == ["installswiftDialog"]


def test_dialog_still_missing_is_fatal():
    m = Machine()
    with pytest.raises(DependencyError):
        m.checker.ensure_dialog(DIALOG, "installswiftDialog")


def test_utiluti_install():
    m = Machine(installs={"install_utiluti": (UTILUTI,)})
    m.checker.ensure_utiluti(UTILUTI, "install_utiluti")
    assert m.triggers() == ["install_utiluti"]

    m = Machine(present={UTILUTI})
    m.checker.ensure_utiluti(UTILUTI, "install_utiluti")
    assert m.triggers() == []


def test_utiluti_missing_is_fatal():
    m = Machine()
    with pytest.raises(DependencyError) as exc:
        m.checker.ensure_utiluti(UTILUTI, "install_utiluti")
    assert exc.value.binary == UTILUTI


def test_trigger_failure_is_reported():
    m = Machine()
    m.runner.responses[(JAMF, "policy", "-trigger")] = OSError("no jamf")
    assert m.checker.trigger_policy("x") is False
    assert m.checker.trigger_policy("") is False

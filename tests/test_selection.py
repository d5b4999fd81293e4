import pytest

from fullstack_cli.config import PackageManager, Workflow, resolve_package_manager, resolve_workflow
from fullstack_cli.errors import InvalidSelectionError
from fullstack_cli.util import is_yes, normalize_choice


@pytest.mark.parametrize("raw", ["npm", "NPM", " npm ", "npm\n", "\tNpm\r\n"])
def test_package_manager_input_is_normalized(raw: str) -> None:
    assert resolve_package_manager(raw) is PackageManager.NPM


def test_bun_is_accepted() -> None:
    assert resolve_package_manager("Bun\n") is PackageManager.BUN


@pytest.mark.parametrize("raw", ["yarn", "", None, "pnpm", "npm bun"])
def test_unknown_package_manager_is_fatal(raw) -> None:
    with pytest.raises(InvalidSelectionError) as exc:
        resolve_package_manager(raw)

    assert "npm" in str(exc.value)


def test_workflow_resolution() -> None:
    assert resolve_workflow(" Fullstack\n") is Workflow.FULLSTACK
    with pytest.raises(InvalidSelectionError):
        resolve_workflow("mobile")


def test_yes_answers() -> None:
    assert is_yes("y")
    assert is_yes(" YES\n")
    assert not is_yes("n")
    assert not is_yes("")
    assert not is_yes("yep")
    assert normalize_choice(None) == ""

import pytest

from fullstack_cli.errors import ProjectNameError
from fullstack_cli.workflow import extract_project_name


def test_extracts_name_from_cd_hint() -> None:
    output = "Scaffolding project in /tmp/my-app...\n\nDone. Now run:\n\n  cd my-app\n  npm install\n"
    assert extract_project_name(output) == "my-app"


def test_strips_trailing_whitespace() -> None:
    assert extract_project_name("  cd my-app   \r\n") == "my-app"


def test_first_hint_wins() -> None:
    assert extract_project_name("  cd first\n  cd second\n") == "first"


@pytest.mark.parametrize(
    "output",
    [
        "",
        "Done. Now run:\n  npm install\n",
        "cd my-app\n",
        "   cd my-app\n",
        "\tcd my-app\n",
        "  cd \n",
    ],
)
def test_missing_hint_fails(output: str) -> None:
    with pytest.raises(ProjectNameError) as exc:
        extract_project_name(output)

    assert "Failed to capture project name" in str(exc.value)

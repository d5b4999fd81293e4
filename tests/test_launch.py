import re
import shlex
from pathlib import Path

from fullstack_cli.commands import CommandSpec
from fullstack_cli.process import resolve_launch_mode, terminal_command

SERVER = CommandSpec("npm", ("run", "dev"))


def test_auto_mode_opens_window_on_macos_and_windows() -> None:
    assert resolve_launch_mode("auto", platform="darwin") == "terminal"
    assert resolve_launch_mode("auto", platform="win32") == "terminal"
    assert resolve_launch_mode("auto", platform="linux") == "foreground"


def test_explicit_mode_is_kept() -> None:
    assert resolve_launch_mode("foreground", platform="darwin") == "foreground"
    assert resolve_launch_mode("terminal", platform="linux") == "terminal"


def test_macos_uses_terminal_app() -> None:
    command = terminal_command(SERVER, Path("/tmp/my-app"), platform="darwin")

    assert command.program == "osascript"
    assert command.args[0] == "-e"
    assert command.args[1] == 'tell app "Terminal" to do script "cd /tmp/my-app && npm run dev"'


def test_linux_uses_configured_emulator() -> None:
    command = terminal_command(SERVER, Path("/tmp/my app"), terminal="xterm", platform="linux")

    assert command.program == "xterm"
    assert command.args[:3] == ("-e", "sh", "-c")
    assert command.args[3].startswith("cd '/tmp/my app' && npm run dev")


def test_windows_uses_start() -> None:
    command = terminal_command(SERVER, Path("C:/work/my-app"), platform="win32")

    assert command.argv[:5] == ["cmd", "/c", "start", "cmd", "/k"]
    assert command.args[-1].endswith("&& npm run dev")


def test_macos_escapes_quotes_in_the_project_path() -> None:
    cwd = Path("/tmp/it's a \"demo\"")
    command = terminal_command(SERVER, cwd, platform="darwin")

    prefix = 'tell app "Terminal" to do script "'
    assert command.args[1].startswith(prefix) and command.args[1].endswith('"')
    body = command.args[1][len(prefix):-1]
    assert re.search(r'(?<!\\)"', body) is None
    assert shlex.split(body.replace('\\"', '"')) == ["cd", str(cwd), "&&", "npm", "run", "dev"]

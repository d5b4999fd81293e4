"""
Step descriptors for every workflow and the functions that carry them out.

A single ordered pipeline covers all workflows; each step lists the workflows
it belongs to and build_plan filters it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, FrozenSet, List, Optional, TYPE_CHECKING

from ..commands import Action
from ..config import Workflow
from ..errors import ProjectNameError
from ..process import resolve_launch_mode, terminal_command
from ..util import is_plain_component
from .payloads import COMPOSE_FILE_PATH, DAISYUI_PAYLOADS, SERVER_ENTRY, StaticPayload, env_file
from .project_name import extract_project_name

if TYPE_CHECKING:  # pragma: no cover
    from .orchestrator import Orchestrator

AUTH_PACKAGES = {
    "clerk": "@clerk/express",
    "firebase": "firebase-admin",
}


@dataclass(frozen=True)
class Step:
    """
    One unit of the pipeline.

    Attributes:
        name: Stable identifier used in outcomes.
        run: Performs the step; may return a summary message.
        workflows: Workflows that include the step.
        label: Phrase used in failure messages ("Error <label>: ...").
        question: Yes/no prompt gating the step; None means unconditional.
    """
    name: str
    run: Callable[["Orchestrator"], Optional[str]]
    workflows: FrozenSet[Workflow]
    label: str
    question: Optional[str] = None


# Backend


def create_backend(orc: "Orchestrator") -> Optional[str]:
    orc.console.print("Okay, let's set up the backend...")
    name = orc.config.backend_dir
    orc.make_directory(name)
    orc.descend(name)
    orc.run(orc.command(Action.INIT))
    return None


def install_express(orc: "Orchestrator") -> Optional[str]:
    orc.console.print("Installing Express...")
    orc.run(orc.command(Action.ADD, "express", "cors", "dotenv"))
    orc.run(orc.command(Action.ADD_DEV, "@types/express", "@types/cors"))
    orc.write([SERVER_ENTRY])
    orc.console.print("Express installed successfully!")
    return None


def write_env_file(orc: "Orchestrator") -> Optional[str]:
    payload = env_file(orc.config.server_port)
    orc.write([payload])
    return f"wrote {payload.path}"


def install_auth(orc: "Orchestrator") -> Optional[str]:
    package = AUTH_PACKAGES[orc.config.auth_provider]
    orc.console.print(f"Installing {package}...")
    orc.run(orc.command(Action.ADD, package))
    return None


def write_compose_file(orc: "Orchestrator") -> Optional[str]:
    content = orc.fetch(orc.config.compose_url)
    orc.write([StaticPayload(COMPOSE_FILE_PATH, content)])
    return f"wrote {COMPOSE_FILE_PATH}"


def install_prisma(orc: "Orchestrator") -> Optional[str]:
    orc.console.print("Installing Prisma...")
    orc.run(orc.command(Action.ADD_DEV, "prisma"))
    orc.run(orc.command(Action.ADD, "@prisma/client"))
    orc.run(orc.command(Action.EXEC, "prisma", "init"))
    return None


def leave_directory(orc: "Orchestrator") -> Optional[str]:
    orc.ascend()
    return f"back in {orc.cwd}"


# Frontend


def create_frontend(orc: "Orchestrator") -> Optional[str]:
    orc.console.print("Okay, let's set up the frontend...")
    name = orc.prompter.ask("Project name (leave blank to let the generator ask):")
    if name and not is_plain_component(name):
        raise ProjectNameError(f"Invalid project name {name!r}: use a single folder name.")
    if name:
        orc.run(orc.command(Action.SCAFFOLD, name))
    else:
        result = orc.run(orc.command(Action.SCAFFOLD), capture=True)
        name = extract_project_name(result.output)
    orc.state.project_name = name
    orc.console.print(f"Project name captured: {name}", highlight=False)
    return None


def enter_frontend(orc: "Orchestrator") -> Optional[str]:
    name = orc.state.project_name
    if not name:
        raise ProjectNameError("Failed to capture project name.")
    orc.descend(name)
    orc.console.print(f"Successfully changed to project directory: {name}", highlight=False)
    return f"entered {name}"


def install_dependencies(orc: "Orchestrator") -> Optional[str]:
    orc.console.print("Installing dependencies...")
    orc.run(orc.command(Action.INSTALL))
    return None


def install_tailwind(orc: "Orchestrator") -> Optional[str]:
    orc.console.print("Installing Tailwind CSS...")
    orc.run(orc.command(Action.ADD_DEV, "tailwindcss", "postcss", "autoprefixer"))
    orc.run(orc.command(Action.EXEC, "tailwindcss", "init", "-p"))
    return None


def install_daisyui(orc: "Orchestrator") -> Optional[str]:
    orc.console.print("Installing DaisyUI...")
    orc.run(orc.command(Action.ADD_DEV, "daisyui@latest"))
    orc.write(DAISYUI_PAYLOADS)
    orc.console.print("Tailwind CSS installed and configured successfully!")
    return None


def install_router(orc: "Orchestrator") -> Optional[str]:
    orc.console.print("Installing react-router-dom...")
    orc.run(orc.command(Action.ADD, "react-router-dom"))
    orc.console.print("react-router-dom installed successfully!")
    return None


def install_axios(orc: "Orchestrator") -> Optional[str]:
    orc.console.print("Installing axios...")
    orc.run(orc.command(Action.ADD, "axios"))
    orc.console.print("axios installed successfully!")
    return None


def launch_dev_server(orc: "Orchestrator") -> Optional[str]:
    server = orc.command(Action.RUN_SCRIPT, "dev")
    mode = resolve_launch_mode(orc.config.launch_mode)
    if mode == "terminal":
        orc.launch(terminal_command(server, orc.cwd, terminal=orc.config.terminal))
        orc.console.print("Server started in a new terminal window.")
        return f"{server} (new window)"
    orc.console.print("Starting the development server, press Ctrl+C to stop it...")
    orc.run(server)
    return None


BACKEND = frozenset({Workflow.BACKEND, Workflow.FULLSTACK})
FRONTEND = frozenset({Workflow.FRONTEND, Workflow.FULLSTACK})
FULLSTACK_ONLY = frozenset({Workflow.FULLSTACK})

PIPELINE: tuple[Step, ...] = (
    Step("create-backend", create_backend, BACKEND, "creating the backend"),
    Step(
        "install-express",
        install_express,
        BACKEND,
        "installing Express",
        question="Do you want to install Express?",
    ),
    Step("write-env-file", write_env_file, BACKEND, "writing the .env file"),
    Step(
        "install-auth",
        install_auth,
        BACKEND,
        "installing the auth SDK",
        question="Do you want to install {config.auth_provider} authentication?",
    ),
    Step(
        "database-compose",
        write_compose_file,
        BACKEND,
        "writing docker-compose.yml",
        question="Do you want a docker compose file for the database?",
    ),
    Step(
        "install-prisma",
        install_prisma,
        BACKEND,
        "installing Prisma",
        question="Do you want to install Prisma?",
    ),
    Step("leave-backend", leave_directory, FULLSTACK_ONLY, "leaving the backend folder"),
    Step("create-frontend", create_frontend, FRONTEND, "creating project"),
    Step("enter-frontend", enter_frontend, FRONTEND, "changing to project directory"),
    Step("install-dependencies", install_dependencies, FRONTEND, "installing dependencies"),
    Step(
        "install-tailwind",
        install_tailwind,
        FRONTEND,
        "installing Tailwind CSS",
        question="Do you want to install Tailwind CSS?",
    ),
    Step(
        "install-daisyui",
        install_daisyui,
        FRONTEND,
        "installing DaisyUI",
        question="Do you want to install DaisyUI?",
    ),
    Step(
        "install-router",
        install_router,
        FRONTEND,
        "installing react-router-dom",
        question="Do you want to install react-router-dom?",
    ),
    Step(
        "install-axios",
        install_axios,
        FRONTEND,
        "installing axios",
        question="Do you want to install axios?",
    ),
    Step(
        "launch-dev-server",
        launch_dev_server,
        FRONTEND,
        "starting the development server",
        question="Do you want to start the development server now?",
    ),
    Step("leave-frontend", leave_directory, FULLSTACK_ONLY, "leaving the project folder"),
)


def build_plan(workflow: Workflow) -> List[Step]:
    """Return the pipeline steps that belong to workflow, in pipeline order."""
    return [step for step in PIPELINE if workflow in step.workflows]

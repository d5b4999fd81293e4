"""
Static file contents written into generated projects.
"""

from __future__ import annotations

from dataclasses import dataclass

TAILWIND_CONFIG_PATH = "tailwind.config.js"
INDEX_CSS_PATH = "src/index.css"
SERVER_ENTRY_PATH = "index.js"
ENV_FILE_PATH = ".env"
COMPOSE_FILE_PATH = "docker-compose.yml"

TAILWIND_CONFIG_WITH_DAISYUI = """/** @type {import('tailwindcss').Config} */
export default {
  content: [
    "./index.html",
    "./src/**/*.{js,ts,jsx,tsx}",
  ],
  theme: {
    extend: {},
  },
  plugins: [
    require('daisyui'),
  ],
}
"""

INDEX_CSS = """@tailwind base;
@tailwind components;
@tailwind utilities;
"""

EXPRESS_SERVER = """const express = require('express');
const cors = require('cors');
require('dotenv').config();

const app = express();
const port = process.env.PORT || 5000;

app.use(cors());
app.use(express.json());

app.get('/', (req, res) => {
  res.json({ status: 'ok' });
});

app.listen(port, () => {
  console.log(`Server listening on port ${port}`);
});
"""


@dataclass(frozen=True)
class StaticPayload:
    """
    Bytes destined for a path relative to the current project directory.
    """
    path: str
    content: bytes

    @classmethod
    def text(cls, path: str, content: str) -> "StaticPayload":
        return cls(path=path, content=content.encode("utf-8"))


def env_file(port: int) -> StaticPayload:
    return StaticPayload.text(ENV_FILE_PATH, f"PORT={port}\n")


DAISYUI_PAYLOADS = (
    StaticPayload.text(TAILWIND_CONFIG_PATH, TAILWIND_CONFIG_WITH_DAISYUI),
    StaticPayload.text(INDEX_CSS_PATH, INDEX_CSS),
)
SERVER_ENTRY = StaticPayload.text(SERVER_ENTRY_PATH, EXPRESS_SERVER)

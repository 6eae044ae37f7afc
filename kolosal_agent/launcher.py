"""Launcher that replaces itself with the agent executable next to it."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

AGENT_EXECUTABLE = "kolosal-agent.exe" if os.name == "nt" else "kolosal-agent"


def agent_path_for(executable: str) -> str:
    """Return the agent executable path in the same directory as ``executable``."""
    directory = os.path.dirname(executable) or "."
    return os.path.join(directory, AGENT_EXECUTABLE)


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv if argv is None else argv)
    executable = args[0] if args else ""
    agent_path = agent_path_for(executable)

    if not os.path.exists(agent_path):
        print(f"Error: kolosal-agent executable not found at {agent_path}", file=sys.stderr)
        return 1

    try:
        os.execv(agent_path, [agent_path, *args[1:]])
    except OSError as exc:
        print(f"Failed to execute kolosal-agent: {exc.strerror or exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
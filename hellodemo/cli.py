"""Command-line entry point dispatching to the demo programs."""

import sys
from collections.abc import Callable, Sequence
from typing import Any

from hellodemo import cs, redis_client, run

COMMANDS: dict[str, Callable[[], Any]] = {
    "go": run.run,
    "server": cs.server,
    "client": cs.client,
    "app": redis_client.run_demo,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command named by the first argument."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        raise SystemExit(f"usage: hellodemo {{{','.join(COMMANDS)}}}")
    command = args[0]
    action = COMMANDS.get(command)
    if action is None:
        print(f"Unknown command: {command}")
    else:
        action()
    return 0
from argparse import ArgumentParser
from pathlib import Path
import logging
import sys

from integrator.details.tools.artifacts import artifacts_main
from integrator.details.tools.classify import classify_main
from integrator.details.tools.filelists import filelists_main
from integrator.details.tools.paths import paths_main
from integrator.details.workspace import Workspace
from integrator.errors import IntegratorError


def main():
    COMMANDS = {
        "artifacts": artifacts_main,
        "classify": classify_main,
        "filelists": filelists_main,
        "paths": paths_main,
    }
    # parse common arguments...
    parser = ArgumentParser(prog="integrator")
    parser.add_argument("command", choices=COMMANDS.keys())
    parser.add_argument("--root", type=Path, default=Path("."))
    parser.add_argument("--verbose", action="store_true")
    parser.add_argument("targets", default=[], nargs="*")
    args, unknown_args = parser.parse_known_args(sys.argv[1:])
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        workspace = Workspace(args.root)
        exit_code = COMMANDS[args.command](
            workspace=workspace,
            targets=args.targets,
            command_args=unknown_args,
        )
    except IntegratorError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(1)
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()

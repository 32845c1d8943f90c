"""Run two commands joined by a pipe, reading one file and writing another."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Mapping

from .libft import split


def get_env_path(env: Mapping[str, str]) -> str | None:
    """Return the PATH entry of the environment, or None if it has none."""
    return env.get("PATH")


def get_path(cmd: str, env: Mapping[str, str]) -> str | None:
    """Find cmd in the directories of PATH; return the first existing candidate."""
    path_env = get_env_path(env)
    if path_env is None:
        return None
    for directory in split(path_env, ":"):
        candidate = directory + cmd if cmd.startswith("/") else f"{directory}/{cmd}"
        if os.path.exists(candidate):
            return candidate
    return None


def check_input_file(path: str) -> bool:
    """True if the input file exists; otherwise report it on standard error."""
    if os.path.exists(path):
        return True
    sys.stderr.write(f"no such file or directory: {path}\n")
    return False


def _execute(cmd: str, env: Mapping[str, str], **io) -> subprocess.CompletedProcess | None:
    """Run one command line; report and return None when it cannot be started."""
    args = split(cmd, " ")
    path = get_path(args[0], env) if args else None
    if path is not None:
        try:
            return subprocess.run(args, executable=path, env=dict(env), check=False, **io)
        except OSError:
            pass
    sys.stderr.write(f"command not found: {cmd}\n")
    return None


def run_pipeline(infile: str, cmd1: str, cmd2: str, outfile: str, env=None) -> int:
    """Behave like `< infile cmd1 | cmd2 > outfile`; return cmd2's exit status.

    When the input file is missing the first command reads the inherited
    standard input. A command that cannot be found produces no output.
    """
    env = os.environ if env is None else env
    has_input = check_input_file(infile)
    fd = os.open(outfile, os.O_CREAT | os.O_RDWR | os.O_TRUNC, 0o644)
    with os.fdopen(fd, "wb") as out:
        if has_input:
            with open(infile, "rb") as source:
                first = _execute(cmd1, env, stdin=source, stdout=subprocess.PIPE)
        else:
            first = _execute(cmd1, env, stdout=subprocess.PIPE)
        data = first.stdout if first is not None else b""
        second = _execute(cmd2, env, input=data, stdout=out)
    return second.returncode if second is not None else 0


def main(argv=None) -> int:
    """Command entry: infile cmd1 cmd2 outfile."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 4:
        sys.stdout.write("invalid number of arguments")
        return 0
    infile, cmd1, cmd2, outfile = args
    try:
        return run_pipeline(infile, cmd1, cmd2, outfile, os.environ)
    except OSError as exc:
        sys.stderr.write(f"{exc.filename}: {exc.strerror}\n")
        return 1


if __name__ == "__main__":
    sys.exit(main())
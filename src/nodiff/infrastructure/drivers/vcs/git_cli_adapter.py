"""VcsPort implementation that runs the git binary with structured arguments (no shell)."""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import structlog

from nodiff.core.application.exceptions import DiffExecutionError
from nodiff.core.application.ports import VcsPort

logger = structlog.get_logger()

WHITESPACE_INSENSITIVE_FLAGS = ("--ignore-space-change", "--ignore-blank-lines")


@dataclass(frozen=True)
class GitResult:
    returncode: int
    stdout: str
    stderr: str


class GitCliAdapter(VcsPort):
    """Reads the working copy at ``workspace`` through ``git`` subprocesses."""

    def __init__(self, workspace: Path | str = ".", remote: str = "origin", git_binary: str = "git") -> None:
        self._workspace = Path(workspace)
        self._remote = remote
        self._git = git_binary

    async def fetch_ref(self, ref_name: str) -> None:
        tracking_ref = f"refs/remotes/{self._remote}/{ref_name}"
        probe = await self._run("rev-parse", "--verify", "--quiet", f"{tracking_ref}^{{commit}}")
        if probe.returncode == 0:
            logger.debug("Base ref already present", ref=tracking_ref)
            return

        logger.info("Fetching base ref", remote=self._remote, ref=ref_name)
        await self._run_checked(
            "fetch",
            "--no-tags",
            "--quiet",
            self._remote,
            f"+refs/heads/{ref_name}:{tracking_ref}",
            description=f"Could not fetch '{ref_name}' from '{self._remote}'",
        )

    async def diff_file_list(
        self,
        base_ref: str,
        head_ref: str,
        path_filter: Sequence[str] = (),
        ignore_whitespace: bool = False,
    ) -> list[str]:
        if ignore_whitespace:
            args = ("diff", "--no-renames", "-z", "--numstat", *WHITESPACE_INSENSITIVE_FLAGS)
        else:
            args = ("diff", "--no-renames", "-z", "--name-only")
        result = await self._run_checked(
            *args,
            base_ref,
            head_ref,
            "--",
            *path_filter,
            description=f"Could not diff {base_ref}..{head_ref}",
        )
        if ignore_whitespace:
            return parse_numstat(result.stdout)
        return parse_name_only(result.stdout)

    async def _run_checked(self, *args: str, description: str) -> GitResult:
        result = await self._run(*args)
        if result.returncode != 0:
            raise DiffExecutionError(
                description,
                stderr=result.stderr,
                returncode=result.returncode,
                command=(self._git, *args),
            )
        return result

    async def _run(self, *args: str) -> GitResult:
        command = (self._git, *args)
        logger.debug("Running git", command=" ".join(command))
        try:
            process = await asyncio.create_subprocess_exec(
                *command,
                cwd=self._workspace,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except OSError as exc:
            raise DiffExecutionError(
                f"Could not run {self._git}", stderr=str(exc), command=command
            ) from exc
        stdout, stderr = await process.communicate()
        return GitResult(
            returncode=process.returncode if process.returncode is not None else -1,
            stdout=stdout.decode("utf-8", errors="surrogateescape"),
            stderr=stderr.decode("utf-8", errors="replace"),
        )


def parse_name_only(output: str) -> list[str]:
    """Paths from ``git diff -z --name-only``."""
    return [path for path in output.split("\0") if path]


def parse_numstat(output: str) -> list[str]:
    """Paths from ``git diff -z --numstat``.

    Files whose whole diff was ignored are not listed at all. A ``0 0`` row
    still carries a change (empty file added or removed, mode change) and
    binary files report ``- -``; both count.
    """
    paths: list[str] = []
    for record in output.split("\0"):
        if not record:
            continue
        _added, _deleted, path = record.split("\t", 2)
        paths.append(path)
    return paths

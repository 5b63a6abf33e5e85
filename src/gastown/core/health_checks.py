"""Health check implementations for gt doctor.

Checks cover what the ephemeral coordination layer relies on: no leftover
dual-store directory, every pending hook decodes, and hook files plus the
local issue store stay out of git.
"""

import shutil
from dataclasses import dataclass
from pathlib import Path

import pathspec

from gastown.core.context import GtContext
from gastown.gateway.beads.real import LOCAL_STORE_FILENAME
from gastown.gateway.hooks.types import HookCorruptedError, hook_filename

LEGACY_WISP_DIRNAME = ".beads-wisp"
_PROBE_AGENT = "doctor-probe"


@dataclass
class CheckResult:
    """Result of a single health check.

    Attributes:
        name: Name of the check
        passed: Whether the check passed
        message: Human-readable message describing the result
        details: Optional additional details (e.g., remediation hint)
    """

    name: str
    passed: bool
    message: str
    details: str | None = None


def check_legacy_wisp_dir(root: Path) -> CheckResult:
    """Fail if the old separate wisp store directory is still around.

    Wisps are a flag on regular issues now; anything left in .beads-wisp/ is
    invisible to every gt command.
    """
    legacy_dir = root / LEGACY_WISP_DIRNAME
    if not legacy_dir.exists():
        return CheckResult(
            name="legacy-wisp-dir",
            passed=True,
            message="No legacy .beads-wisp/ directory",
        )
    return CheckResult(
        name="legacy-wisp-dir",
        passed=False,
        message=f"Legacy wisp directory found: {legacy_dir}",
        details=(
            "Wisps are now issues flagged ephemeral in the main store.\n"
            f"Remove the old directory: rm -rf {legacy_dir}"
        ),
    )


def check_hook_files(ctx: GtContext) -> CheckResult:
    """Verify every pending hook decodes; list the ones that do not."""
    agents = ctx.hooks.list_pending_agents()
    corrupted: list[str] = []
    for agent in agents:
        try:
            ctx.hooks.read_hook(agent)
        except HookCorruptedError as e:
            corrupted.append(f"{agent}: {e.reason}")

    if corrupted:
        return CheckResult(
            name="hook-files",
            passed=False,
            message=f"{len(corrupted)} of {len(agents)} hook file(s) corrupted",
            details="\n".join(corrupted),
        )
    return CheckResult(
        name="hook-files",
        passed=True,
        message=f"{len(agents)} pending hook file(s), all readable",
    )


def _is_gitignored(root: Path, path: Path) -> bool:
    """Check path against every .gitignore from root down to path's directory."""
    try:
        relative = path.relative_to(root)
    except ValueError:
        return False

    directories = [root.joinpath(*relative.parts[:depth]) for depth in range(len(relative.parts))]
    for directory in directories:
        gitignore = directory / ".gitignore"
        if not gitignore.exists():
            continue
        lines = gitignore.read_text(encoding="utf-8").splitlines()
        spec = pathspec.PathSpec.from_lines("gitwildmatch", lines)
        if spec.match_file(str(path.relative_to(directory))):
            return True
    return False


def check_hooks_gitignored(ctx: GtContext) -> CheckResult:
    """Verify hook files and the local issue store are excluded from git.

    Both hold local-only state; committing them would leak ephemeral data
    into the synced history.
    """
    root = ctx.config.root
    probes = {
        "hook files": ctx.config.hook_dir / hook_filename(_PROBE_AGENT),
        "local issue store": ctx.config.beads_dir / LOCAL_STORE_FILENAME,
    }
    exposed = [
        f"{label} ({path.relative_to(root)})"
        for label, path in probes.items()
        if path.is_relative_to(root) and not _is_gitignored(root, path)
    ]
    if exposed:
        return CheckResult(
            name="gitignore",
            passed=False,
            message="Local-only files are not gitignored: " + ", ".join(exposed),
            details=(
                f"Add to {ctx.config.beads_dir / '.gitignore'}:\n"
                "  hook-*.json\n  local.jsonl\n  local.jsonl.lock"
            ),
        )
    return CheckResult(
        name="gitignore",
        passed=True,
        message="Hook files and local issue store are gitignored",
    )


def check_git_available() -> CheckResult:
    """Check that git is on PATH; the synced log is only useful inside a repository."""
    if shutil.which("git") is None:
        return CheckResult(
            name="git",
            passed=False,
            message="git not found in PATH",
            details="The synced issues.jsonl log is committed with git",
        )
    return CheckResult(name="git", passed=True, message="git available")


def run_all_checks(ctx: GtContext) -> list[CheckResult]:
    """Run every health check in display order."""
    return [
        check_git_available(),
        check_legacy_wisp_dir(ctx.config.root),
        check_hook_files(ctx),
        check_hooks_gitignored(ctx),
    ]

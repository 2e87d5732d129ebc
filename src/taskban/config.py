"""Settings read from git config, plus committers for assignee suggestions.

Only the ``[taskban]`` section is read. Nothing is ever written back:
board state is not persisted.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo

logger = logging.getLogger(__name__)

SECTION = "taskban"
MAX_COMMITS = 200

TASKBAN_DEFAULTS = {
    "search-delay": 300,
    "due-days": 3,
    "announce": True,
}

_COMMITTER_RE = re.compile(r"^(.+?)\s*<([^>]+)>$")


@dataclass(frozen=True)
class Config:
    search_delay: int = TASKBAN_DEFAULTS["search-delay"]
    due_days: int = TASKBAN_DEFAULTS["due-days"]
    announce: bool = TASKBAN_DEFAULTS["announce"]
    committers: tuple[str, ...] = field(default_factory=tuple)

    @property
    def search_delay_seconds(self) -> float:
        return self.search_delay / 1000

    @property
    def assignee_suggestions(self) -> list[str]:
        """Distinct committer names, sorted."""
        return sorted({parse_committer(c)[0] for c in self.committers})


def _python_key(git_key: str) -> str:
    """Convert git-style key (hyphenated) to Python-style (underscored)."""
    return git_key.replace("-", "_")


def _coerce_value(git_key: str, raw: str) -> Any:
    """Type-coerce a value by the type of its default."""
    default = TASKBAN_DEFAULTS[git_key]
    if isinstance(default, bool):
        return raw.strip().lower() in ("true", "yes", "on", "1")
    return int(raw)


def parse_committer(committer: str) -> tuple[str, str]:
    """Parse "Name <email>" into (name, email).

    If parsing fails, the full string is used as both name and email.
    """
    match = _COMMITTER_RE.match(committer.strip())
    if match:
        return match.group(1), match.group(2)
    name = committer.strip()
    return name, name


def open_repo(path: str | Path) -> Repo | None:
    """Open the repository containing path, or None if there isn't one."""
    try:
        return Repo(path, search_parent_directories=True)
    except (InvalidGitRepositoryError, NoSuchPathError):
        return None


def read_git_config(repo: Repo) -> dict[str, Any]:
    """Read the [taskban] section into a dict of Python-style keys.

    Unknown keys are ignored. Values that fail coercion fall back to the
    default with a warning.
    """
    result = {_python_key(k): v for k, v in TASKBAN_DEFAULTS.items()}
    reader = repo.config_reader()
    if not reader.has_section(SECTION):
        return result
    for git_k, raw in reader.items(SECTION):
        if git_k not in TASKBAN_DEFAULTS:
            logger.debug("ignoring unknown config key %s.%s", SECTION, git_k)
            continue
        try:
            result[_python_key(git_k)] = _coerce_value(git_k, str(raw))
        except ValueError:
            logger.warning("bad value %r for %s.%s, using default", raw, SECTION, git_k)
    return result


def get_committers(repo: Repo, max_count: int = MAX_COMMITS) -> list[str]:
    """Extract unique committers from recent git history.

    Returns a sorted list of "Name <email>" strings. Empty for a
    repository with no commits.
    """
    seen: set[str] = set()
    try:
        for commit in repo.iter_commits(max_count=max_count, all=True):
            seen.add(f"{commit.author.name} <{commit.author.email}>")
    except (ValueError, GitCommandError):
        return []
    return sorted(seen)


def load_config(path: str | Path = ".") -> Config:
    """Build a Config from the repository at path, or defaults outside git."""
    repo = open_repo(path)
    if repo is None:
        logger.info("%s is not in a git repository, using default settings", path)
        return Config()
    values = read_git_config(repo)
    return Config(committers=tuple(get_committers(repo)), **values)

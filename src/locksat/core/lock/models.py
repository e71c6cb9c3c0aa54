"""Lock data models --- LockedProject and Lock.

A lock pins every dependency project to one version and remembers which
import paths were fed to the solver that produced it. Both types are
frozen: nothing in locksat ever changes a lock.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from locksat.core.constraints import Version
from locksat.exceptions import LockfileError

ProjectRoot = str


@dataclass(frozen=True)
class LockedProject:
    """A single project pinned by the lock.

    Attributes:
        root: Import path prefix identifying the project
            (e.g., "github.com/pkg/errors").
        version: The pinned version.
        packages: Packages of the project the lock uses, relative to
            ``root`` ("." for the root package itself).
    """

    root: ProjectRoot
    version: Version
    packages: tuple[str, ...] = ()


@dataclass(frozen=True)
class Lock:
    """A pinned set of projects plus the imports that justified them.

    ``input_imports`` is what makes removals detectable: without the list
    of imports the solver saw, finding imports that are no longer needed
    would mean walking the whole dependency graph.

    Raises:
        LockfileError: On construction, if two projects share a root.
    """

    projects: tuple[LockedProject, ...] = ()
    input_imports: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for lp in self.projects:
            if lp.root in seen:
                raise LockfileError(f"Project {lp.root!r} is locked more than once")
            seen.add(lp.root)

    @classmethod
    def of(
        cls,
        projects: Iterable[LockedProject] = (),
        input_imports: Iterable[str] = (),
    ) -> Lock:
        """Build a Lock from any iterables."""
        return cls(tuple(projects), tuple(input_imports))

    def get_project(self, root: ProjectRoot) -> LockedProject | None:
        """Return the locked project for *root*, or None."""
        for lp in self.projects:
            if lp.root == root:
                return lp
        return None

    @property
    def project_roots(self) -> list[ProjectRoot]:
        """Return sorted roots of all locked projects."""
        return sorted(lp.root for lp in self.projects)

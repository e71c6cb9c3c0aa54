"""locksat: Decide whether a dependency lock still satisfies its project inputs."""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

"""forge configuration.

A single typed :class:`Config` is built once by the CLI entry point and then
passed explicitly to the registry, printer, wizard and generator.  Nothing in
the core reads ambient global state.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from forge import __version__

TEMPLATES_DIRNAME = "templates"


def resolve_forge_home(package_dir: Path | None = None) -> Path:
    """Locate the forge home directory.

    Priority: ``FORGE_HOME`` environment variable, then a location derived
    from the installed package: its parent directory if that holds a
    ``templates/`` directory, else one level further up, else the package
    parent itself.
    """
    home = os.environ.get("FORGE_HOME")
    if home:
        return Path(home)

    package_dir = (package_dir or Path(__file__).parent).resolve()
    candidate = package_dir.parent
    if (candidate / TEMPLATES_DIRNAME).is_dir():
        return candidate
    if (candidate.parent / TEMPLATES_DIRNAME).is_dir():
        return candidate.parent
    return candidate


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() not in ("", "0", "false", "no")


class Config(BaseModel):
    """Global forge configuration."""

    forge_home: Path = Field(default_factory=resolve_forge_home)
    templates_dir_override: Path | None = Field(
        default=None, description="Explicit templates root; wins over forge_home"
    )
    quiet: bool = Field(default=False, description="Suppress non-essential output")
    no_color: bool = Field(default=False, description="Disable colored output")
    version: str = Field(default=__version__)

    # ------------------------------------------------------------------
    # Derived paths (read-only properties)
    # ------------------------------------------------------------------

    @property
    def templates_dir(self) -> Path:
        """Root directory with one subdirectory per template."""
        if self.templates_dir_override is not None:
            return self.templates_dir_override
        return self.forge_home / TEMPLATES_DIRNAME

    # ------------------------------------------------------------------
    # Construction helpers
    # ------------------------------------------------------------------

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            FORGE_HOME, FORGE_TEMPLATES_DIR, FORGE_QUIET, NO_COLOR.
        """
        override = os.environ.get("FORGE_TEMPLATES_DIR")
        return cls(
            forge_home=resolve_forge_home(),
            templates_dir_override=Path(override) if override else None,
            quiet=_env_flag("FORGE_QUIET"),
            no_color=_env_flag("NO_COLOR"),
        )

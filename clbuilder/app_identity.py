"""Name, description and other details that identify an application."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from clbuilder.app_version import AppVersion


@dataclass
class AppIdentity:
    """What the help output says about the application."""

    name: str = ""
    description: str = ""
    version: AppVersion = field(default_factory=AppVersion)
    author: Optional[str] = None
    license: Optional[str] = None

    def written_by(self, author: str) -> AppIdentity:
        self.author = author
        return self

    def licensed_with(self, license: str) -> AppIdentity:
        self.license = license
        return self
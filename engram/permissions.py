"""Access control for agents sharing memory."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Optional

from .observation import Scope


class AccessLevel(IntEnum):
    """Access levels, ordered from least to most privileged."""

    READ = 1
    WRITE = 2
    ADMIN = 3

    def __str__(self):
        return self.name.lower()

    def __format__(self, spec):
        return format(str(self), spec)


@dataclass
class PermissionRule:
    """The access one agent has to one project."""

    agent_id: str
    project: str
    access: AccessLevel
    scope_filter: Optional[Scope] = None

    def allows(self, required):
        """True if this rule grants at least the required level."""
        return self.access >= required


@dataclass
class PermissionEngine:
    """A set of rules deciding what each agent may do."""

    rules: list = field(default_factory=list)

    def add_rule(self, rule):
        """Add a rule."""
        self.rules.append(rule)

    def check(self, agent_id, project, required):
        """True if some rule lets the agent act on the project at that level."""
        return any(
            r.agent_id == agent_id and r.project == project and r.allows(required)
            for r in self.rules
        )

    def agents_for_project(self, project):
        """Agent ids of every rule for the project, in rule order."""
        return [r.agent_id for r in self.rules if r.project == project]
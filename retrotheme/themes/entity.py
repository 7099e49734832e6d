"""Retro theme entity."""

from __future__ import annotations

import copy
import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Mapping

from retrotheme.errors import RetroThemeError
from retrotheme.themes.base import BaseTheme
from retrotheme.themes.merge import deep_merge
from retrotheme.themes.models import (
    Advisory,
    DomainEvent,
    OverridesUpdated,
    ThemeCreated,
)
from retrotheme.themes.validation import validate_overrides

_CREATE_KEY = object()


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(slots=True)
class EntityIdentity:
    """Identity and timestamps of an entity."""

    id: str
    created_at: datetime = field(default_factory=_utcnow)
    updated_at: datetime = field(default_factory=_utcnow)

    def touch(self) -> None:
        self.updated_at = _utcnow()


class RetroTheme:
    """A base theme paired with a validated retro override tree.

    Instances come from :meth:`create`. The override tree is copied on the way
    in and on the way out, so callers never hold a live reference to it.
    Domain events pile up until :meth:`get_domain_events` drains them.
    """

    def __init__(
        self,
        identity: EntityIdentity,
        base_theme: BaseTheme,
        overrides: dict[str, Any],
        metadata: dict[str, Any],
        *,
        _key: object = None,
    ) -> None:
        if _key is not _CREATE_KEY:
            raise TypeError("RetroTheme instances are created with RetroTheme.create()")
        self._identity = identity
        self._base_theme = base_theme
        self._overrides = overrides
        self._metadata = metadata
        self._advisories: tuple[Advisory, ...] = ()
        self._domain_events: list[DomainEvent] = []

    @classmethod
    def create(
        cls,
        base_theme: BaseTheme,
        overrides: Mapping[str, Any] | None = None,
        metadata: Mapping[str, Any] | None = None,
        *,
        theme_id: str | None = None,
    ) -> RetroTheme:
        """Validate and build a new retro theme, recording a creation event."""
        tree = copy.deepcopy(dict(overrides or {}))
        report = validate_overrides(base_theme, tree)

        now = _utcnow()
        identity = EntityIdentity(id=theme_id or str(uuid.uuid4()), created_at=now, updated_at=now)
        theme = cls(
            identity,
            base_theme,
            tree,
            copy.deepcopy(dict(metadata or {})),
            _key=_CREATE_KEY,
        )
        theme._advisories = report.advisories
        theme._domain_events.append(
            ThemeCreated(
                theme_id=identity.id,
                base_theme_version=base_theme.version,
                override_categories=tuple(tree.keys()),
                occurred_at=identity.created_at,
            )
        )
        return theme

    # -- identity --

    @property
    def id(self) -> str:
        return self._identity.id

    @property
    def created_at(self) -> datetime:
        return self._identity.created_at

    @property
    def updated_at(self) -> datetime:
        return self._identity.updated_at

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RetroTheme):
            return NotImplemented
        return self._identity.id == other._identity.id

    def __hash__(self) -> int:
        return hash(self._identity.id)

    def __repr__(self) -> str:
        return f"RetroTheme(id={self.id!r}, overrides={sorted(self._overrides)!r})"

    # -- tokens --

    def get_tokens(self) -> dict[str, Any]:
        """Base theme tokens with the retro overrides merged on top."""
        return deep_merge(self._base_theme.to_tokens(), self._overrides)

    def get_overrides(self) -> dict[str, Any]:
        return copy.deepcopy(self._overrides)

    def update_overrides(self, overrides: Mapping[str, Any]) -> None:
        """Replace the whole override tree.

        The new tree is validated before anything changes, so a failing update
        leaves the entity exactly as it was.
        """
        tree = copy.deepcopy(dict(overrides))
        report = validate_overrides(self._base_theme, tree)

        self._overrides = tree
        self._advisories = report.advisories
        self._identity.touch()
        self._domain_events.append(
            OverridesUpdated(
                theme_id=self.id,
                updated_categories=tuple(tree.keys()),
                occurred_at=self._identity.updated_at,
            )
        )

    # -- events --

    def get_domain_events(self) -> list[DomainEvent]:
        """Return pending events in order and clear the queue."""
        events = list(self._domain_events)
        self._domain_events.clear()
        return events

    # -- read-only views --

    @property
    def base_theme(self) -> BaseTheme:
        return self._base_theme

    @property
    def metadata(self) -> dict[str, Any]:
        return copy.deepcopy(self._metadata)

    @property
    def advisories(self) -> tuple[Advisory, ...]:
        return self._advisories

    @property
    def is_valid(self) -> bool:
        try:
            validate_overrides(self._base_theme, self._overrides, log_advisories=False)
        except RetroThemeError:
            return False
        return True

    @property
    def characteristics(self) -> list[str]:
        labels: list[str] = []
        font = _lookup(self._overrides, "typography", "fontFamily", "base")
        if isinstance(font, str) and "monospace" in font:
            labels.append("monospace-font")
        if _lookup(self._overrides, "color", "palette", "neutral"):
            labels.append("warm-palette")
        if _lookup(self._overrides, "shadow", "semantic"):
            labels.append("soft-shadows")
        return labels


def _lookup(tree: Mapping[str, Any], *keys: str) -> Any:
    node: Any = tree
    for key in keys:
        if not isinstance(node, Mapping):
            return None
        node = node.get(key)
    return node

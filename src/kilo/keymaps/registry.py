"""Keymap registry responsible for storing actions and bindings."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Dict, Iterator, Optional

from kilo.runtime.telemetry import span

from .models import ActionRef, Binding


@dataclass(slots=True)
class RegistryStats:
    """Lightweight snapshot describing registry state."""

    action_count: int
    binding_count: int
    fallback: Optional[str]


class KeymapConflictError(RuntimeError):
    """Raised when a new binding claims a key that is already bound."""

    def __init__(self, binding: Binding, existing: Binding):
        super().__init__(
            f"Binding '{binding.id}' conflicts with '{existing.id}' "
            f"on key {binding.key_signature}"
        )
        self.binding = binding
        self.existing = existing


class KeymapRegistry:
    """Owns action references and the key -> binding index.

    Keys without a binding resolve to the fallback action, which is how
    ordinary typing reaches the insert-character action.
    """

    def __init__(self, *, logger_name: str | None = None) -> None:
        self._actions: Dict[str, ActionRef] = {}
        self._bindings: Dict[str, Binding] = {}
        self._key_index: Dict[int, str] = {}
        self._fallback: Optional[str] = None
        self._logger_name = logger_name
        self._revision = 0

    def revision(self) -> int:
        return self._revision

    def get_action(self, action_id: str) -> ActionRef:
        try:
            return self._actions[action_id]
        except KeyError as exc:
            raise KeyError(f"Action '{action_id}' is not registered") from exc

    def get_binding(self, binding_id: str) -> Binding:
        try:
            return self._bindings[binding_id]
        except KeyError as exc:
            raise KeyError(f"Binding '{binding_id}' is not registered") from exc

    def register_action(self, action: ActionRef, *, replace: bool = False) -> ActionRef:
        with span(
            "keymaps::register_action",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"action_id": action.id},
        ):
            if not replace and action.id in self._actions:
                raise ValueError(f"Action '{action.id}' already registered")
            self._actions[action.id] = action
            return action

    def register_binding(self, binding: Binding, *, replace: bool = False) -> Binding:
        with span(
            "keymaps::register_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding.id, "key": binding.key_signature},
        ) as handle:
            if binding.action_id not in self._actions:
                handle.add_metadata("missing_action", binding.action_id)
                raise KeyError(
                    f"Binding '{binding.id}' references unknown action '{binding.action_id}'"
                )

            conflict = self.detect_conflict(binding)
            if conflict is not None and not replace:
                handle.add_metadata("conflict", conflict.id)
                raise KeymapConflictError(binding, conflict)

            if replace:
                if conflict is not None:
                    self._remove_binding(conflict)
                existing = self._bindings.get(binding.id)
                if existing is not None:
                    self._remove_binding(existing)
            elif binding.id in self._bindings:
                raise ValueError(f"Binding id '{binding.id}' already registered")

            self._bindings[binding.id] = binding
            self._key_index[binding.key] = binding.id
            self._touch()
            return binding

    def unregister_binding(self, binding_id: str) -> Optional[Binding]:
        with span(
            "keymaps::unregister_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding_id},
        ):
            binding = self._bindings.get(binding_id)
            if binding is None:
                return None
            self._remove_binding(binding)
            self._touch()
            return binding

    def update_binding(self, binding_id: str, **changes: object) -> Binding:
        with span(
            "keymaps::update_binding",
            logger_name=self._logger_name,
            component="keymaps",
            metadata={"binding_id": binding_id},
        ) as handle:
            if binding_id not in self._bindings:
                handle.fail("missing_binding")
                raise KeyError(f"Binding '{binding_id}' not found")

            current = self._bindings[binding_id]
            updated = replace(current, **changes)
            if updated.action_id not in self._actions:
                handle.add_metadata("missing_action", updated.action_id)
                raise KeyError(
                    f"Binding '{binding_id}' references unknown action '{updated.action_id}'"
                )

            conflict = self.detect_conflict(updated)
            if conflict is not None and conflict.id != binding_id:
                handle.add_metadata("conflict", conflict.id)
                raise KeymapConflictError(updated, conflict)

            self._remove_binding(current)
            self._bindings[binding_id] = updated
            self._key_index[updated.key] = binding_id
            self._touch()
            return updated

    def set_fallback(self, action_id: Optional[str]) -> None:
        if action_id is not None and action_id not in self._actions:
            raise KeyError(f"Fallback references unknown action '{action_id}'")
        self._fallback = action_id
        self._touch()

    def resolve(self, key: int) -> Optional[ActionRef]:
        """Action bound to ``key``, else the fallback action, else ``None``."""

        binding_id = self._key_index.get(key)
        if binding_id is not None:
            return self._actions[self._bindings[binding_id].action_id]
        if self._fallback is not None:
            return self._actions[self._fallback]
        return None

    def binding_for(self, key: int) -> Optional[Binding]:
        binding_id = self._key_index.get(key)
        return self._bindings[binding_id] if binding_id is not None else None

    def iter_bindings(self) -> Iterator[Binding]:
        yield from self._bindings.values()

    def stats(self) -> RegistryStats:
        return RegistryStats(
            action_count=len(self._actions),
            binding_count=len(self._bindings),
            fallback=self._fallback,
        )

    def detect_conflict(self, binding: Binding) -> Optional[Binding]:
        existing_id = self._key_index.get(binding.key)
        if existing_id is None or existing_id == binding.id:
            return None
        return self._bindings[existing_id]

    def _remove_binding(self, binding: Binding) -> None:
        self._bindings.pop(binding.id, None)
        if self._key_index.get(binding.key) == binding.id:
            del self._key_index[binding.key]

    def _touch(self) -> None:
        self._revision += 1


__all__ = [
    "KeymapRegistry",
    "KeymapConflictError",
    "RegistryStats",
]

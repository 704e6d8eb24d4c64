"""Test helpers for code that depends on typed_json configuration."""

from __future__ import annotations

from typed_json import _test_hooks


class FakeEnv:
    """In-memory environment installed through the config hook."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def set(self, key: str, value: str) -> None:
        self._values[key] = value

    def unset(self, key: str) -> None:
        self._values.pop(key, None)

    def get(self, key: str) -> str | None:
        return self._values.get(key)


def make_fake_env() -> FakeEnv:
    """Install and return an empty FakeEnv. The caller's fixture restores the hook."""
    env = FakeEnv()
    _test_hooks.get_env = env.get
    return env


__all__ = ["FakeEnv", "make_fake_env"]

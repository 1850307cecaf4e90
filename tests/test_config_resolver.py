"""Tests for the path resolver (core/config_resolver.py).

The environment is faked — no real ``os.environ`` or ``os.getcwd()``.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from conftest import FakeEnvironment
from projector.core.config_resolver import (
    CONFIG_HOME_ENV,
    build_config,
    resolve_config_path,
    resolve_pwd,
)
from projector.core.models import Add, Config, Opts, Print
from projector.exceptions import (
    EnvironmentLookupError,
    InvalidArgumentsError,
    WorkingDirectoryUnavailableError,
)


# ---------------------------------------------------------------------------
# resolve_config_path
# ---------------------------------------------------------------------------

class TestResolveConfigPath:
    def test_derived_from_xdg(self, fake_env: FakeEnvironment) -> None:
        path = resolve_config_path(None, fake_env)
        assert path == Path("/home/u/.config/projector/projector.json")

    def test_explicit_used_as_is(self, fake_env: FakeEnvironment) -> None:
        explicit = Path("relative/does-not-exist.json")
        assert resolve_config_path(explicit, fake_env) is explicit

    def test_explicit_ignores_missing_env(self) -> None:
        env = FakeEnvironment({})
        assert resolve_config_path(Path("/x.json"), env) == Path("/x.json")

    def test_missing_env_fails(self) -> None:
        env = FakeEnvironment({})
        with pytest.raises(EnvironmentLookupError, match=CONFIG_HOME_ENV) as exc_info:
            resolve_config_path(None, env)
        assert exc_info.value.variable == CONFIG_HOME_ENV
        assert exc_info.value.hint is not None
        assert "--config" in exc_info.value.hint

    def test_empty_env_fails(self) -> None:
        env = FakeEnvironment({CONFIG_HOME_ENV: ""})
        with pytest.raises(EnvironmentLookupError):
            resolve_config_path(None, env)

    def test_deterministic(self, fake_env: FakeEnvironment) -> None:
        assert resolve_config_path(None, fake_env) == resolve_config_path(None, fake_env)


# ---------------------------------------------------------------------------
# resolve_pwd
# ---------------------------------------------------------------------------

class TestResolvePwd:
    def test_explicit_skips_provider(self, fake_env: FakeEnvironment) -> None:
        assert resolve_pwd(Path("/tmp/x"), fake_env) == Path("/tmp/x")
        assert fake_env.cwd_calls == 0

    def test_defaults_to_current_dir(self, fake_env: FakeEnvironment) -> None:
        assert resolve_pwd(None, fake_env) == Path("/home/u/work")
        assert fake_env.cwd_calls == 1

    def test_unavailable_propagates(self) -> None:
        env = FakeEnvironment({}, cwd=None)
        with pytest.raises(WorkingDirectoryUnavailableError):
            resolve_pwd(None, env)


# ---------------------------------------------------------------------------
# build_config
# ---------------------------------------------------------------------------

class TestBuildConfig:
    def test_all_defaults(self, fake_env: FakeEnvironment) -> None:
        config = build_config(Opts(), fake_env)
        assert config == Config(
            operation=Print(None),
            pwd=Path("/home/u/work"),
            config=Path("/home/u/.config/projector/projector.json"),
        )

    def test_overrides(self) -> None:
        env = FakeEnvironment({}, cwd=None)
        config = build_config(
            Opts(args=("add", "foo", "bar"), pwd=Path("/p"), config=Path("/c.json")),
            env,
        )
        assert config.operation == Add("foo", "bar")
        assert config.pwd == Path("/p")
        assert config.config == Path("/c.json")

    def test_invalid_arguments_propagate(self, fake_env: FakeEnvironment) -> None:
        with pytest.raises(InvalidArgumentsError):
            build_config(Opts(args=("rm",)), fake_env)

    def test_missing_env_propagates(self) -> None:
        with pytest.raises(EnvironmentLookupError):
            build_config(Opts(), FakeEnvironment({}))

    def test_unavailable_cwd_propagates(self) -> None:
        env = FakeEnvironment({CONFIG_HOME_ENV: "/c"}, cwd=None)
        with pytest.raises(WorkingDirectoryUnavailableError):
            build_config(Opts(), env)

    def test_same_overrides_same_config(self, fake_env: FakeEnvironment) -> None:
        opts = Opts(args=("foo",), config=Path("/c.json"))
        assert build_config(opts, fake_env) == build_config(opts, fake_env)

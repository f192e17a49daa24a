"""Tests for environment providers."""

import pytest

from typed_env import (
    ChainedEnvironmentProvider,
    DotenvEnvironmentProvider,
    EnvironmentAccessor,
    EnvironmentFileNotFoundError,
    EnvironmentProvider,
    MappingEnvironmentProvider,
    OsEnvironmentProvider,
)


def test_os_provider_reads_process_environment(monkeypatch):
    monkeypatch.setenv("TESTING_OS_PROVIDER_1234", "value")
    monkeypatch.delenv("TESTING_OS_PROVIDER_1234_nope", raising=False)

    provider = OsEnvironmentProvider()
    assert provider.lookup("TESTING_OS_PROVIDER_1234") == "value"
    assert provider.lookup("TESTING_OS_PROVIDER_1234_nope") is None


def test_mapping_provider_copies_values():
    values = {"A": "1"}
    provider = MappingEnvironmentProvider(values)
    values["A"] = "2"
    values["B"] = "3"

    assert provider.lookup("A") == "1"
    assert provider.lookup("B") is None


def test_providers_satisfy_protocol(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("A=1\n")

    for provider in (
        OsEnvironmentProvider(),
        MappingEnvironmentProvider(),
        DotenvEnvironmentProvider(env_file),
        ChainedEnvironmentProvider(),
    ):
        assert isinstance(provider, EnvironmentProvider)


def test_dotenv_provider_loads_file(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text(
        "PORT=8080\n"
        "DEBUG=true\n"
        "# comment\n"
        "export TIMEOUT=1m30s\n"
        'QUOTED="hello world"\n'
        "EMPTY=\n"
        "DECLARED_ONLY\n"
    )

    provider = DotenvEnvironmentProvider(env_file)

    assert provider.lookup("PORT") == "8080"
    assert provider.lookup("TIMEOUT") == "1m30s"
    assert provider.lookup("QUOTED") == "hello world"
    assert provider.lookup("EMPTY") == ""
    assert provider.lookup("DECLARED_ONLY") is None
    assert provider.lookup("MISSING") is None


def test_dotenv_provider_does_not_interpolate(tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("HOST=db\nURL=postgres://${HOST}/app\n")

    provider = DotenvEnvironmentProvider(env_file)

    assert provider.lookup("URL") == "postgres://${HOST}/app"


def test_dotenv_provider_missing_file(tmp_path):
    with pytest.raises(EnvironmentFileNotFoundError) as exc_info:
        DotenvEnvironmentProvider(tmp_path / "missing.env")

    assert isinstance(exc_info.value, FileNotFoundError)
    assert "missing.env" in str(exc_info.value)


def test_dotenv_provider_does_not_touch_process_environment(tmp_path, monkeypatch):
    monkeypatch.delenv("TESTING_DOTENV_ONLY_1234", raising=False)
    env_file = tmp_path / ".env"
    env_file.write_text("TESTING_DOTENV_ONLY_1234=1\n")

    DotenvEnvironmentProvider(env_file)

    assert OsEnvironmentProvider().lookup("TESTING_DOTENV_ONLY_1234") is None


def test_chained_provider_first_value_wins():
    provider = ChainedEnvironmentProvider(
        MappingEnvironmentProvider({"A": "front", "EMPTY": ""}),
        MappingEnvironmentProvider({"A": "back", "B": "back", "EMPTY": "back"}),
    )

    assert provider.lookup("A") == "front"
    assert provider.lookup("B") == "back"
    assert provider.lookup("EMPTY") == ""
    assert provider.lookup("C") is None


def test_accessor_over_process_environment_and_dotenv(tmp_path, monkeypatch):
    env_file = tmp_path / ".env"
    env_file.write_text("TESTING_CHAIN_PORT_1234=8080\nTESTING_CHAIN_RETRIES_1234=3\n")
    monkeypatch.setenv("TESTING_CHAIN_PORT_1234", "9090")
    monkeypatch.delenv("TESTING_CHAIN_RETRIES_1234", raising=False)

    accessor = EnvironmentAccessor(
        ChainedEnvironmentProvider(OsEnvironmentProvider(), DotenvEnvironmentProvider(env_file))
    )

    assert accessor.get_int("TESTING_CHAIN_PORT_1234", 0) == 9090
    assert accessor.lookup_int("TESTING_CHAIN_RETRIES_1234") == (3, True)

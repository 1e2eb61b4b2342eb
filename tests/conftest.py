"""Pytest configuration and fixtures."""

import tempfile
from pathlib import Path
from typing import Generator

import pytest

from lexer_core.config import LexerSettings
from lexer_core.contract import LexerCore
from lexer_core.registry.storage import RegistryStorage

DEPLOYER = "ST1PQHQKV0RJXZFY1DGX8MNSNYVE3VGZJSRTPGZGM"
WALLET_1 = "ST1SJ3DTE5DN7X54YDH5D64R3BCB6A2AG2ZQ8YPD5"
WALLET_2 = "ST2CY5V39NHDPWSXMW9QDT3HC3GD6Q6XX4CFRK9AG"


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep LEXER_* settings from the host environment out of tests."""
    for var in (
        "LEXER_ADMINISTRATOR",
        "LEXER_STATE_DIR",
        "LEXER_AUDIT_DIR",
        "LEXER_PERSIST",
        "LEXER_LOG_LEVEL",
    ):
        monkeypatch.delenv(var, raising=False)


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory that is cleaned up after the test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def deployer() -> str:
    """The administrator identity."""
    return DEPLOYER


@pytest.fixture
def participant() -> str:
    """A regular participant identity."""
    return WALLET_1


@pytest.fixture
def other_participant() -> str:
    """A second participant identity."""
    return WALLET_2


@pytest.fixture
def core(deployer: str) -> LexerCore:
    """In-memory registry deployed by the deployer."""
    return LexerCore(deployer)


@pytest.fixture
def settings(temp_dir: Path, deployer: str) -> LexerSettings:
    """Persistent settings rooted in a temporary directory."""
    return LexerSettings(
        administrator=deployer,
        state_dir=temp_dir / "registry",
        audit_dir=temp_dir / "audit",
    )


@pytest.fixture
def storage(settings: LexerSettings) -> RegistryStorage:
    """Snapshot storage in a temporary directory."""
    return RegistryStorage(state_dir=settings.state_dir, audit_dir=settings.audit_dir)


@pytest.fixture
def persistent_core(settings: LexerSettings) -> LexerCore:
    """Registry backed by snapshot storage in a temporary directory."""
    return LexerCore.load(settings)

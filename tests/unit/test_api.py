"""Tests for the top-level solbuild.compile / solbuild.link functions."""

import pytest
from unittest.mock import Mock, patch

import solbuild
from solbuild import SolcConfig

ADDRESS = "00000000000000000000000000000000000000ff"


@pytest.fixture
def contracts_dir(tmp_path):
    (tmp_path / "GetSenderTest.sol").write_text("contract GetSenderTest {}")
    (tmp_path / "LibraryTest.bin").write_text("6060")
    return tmp_path


@patch("subprocess.run")
def test_compile(mock_run, contracts_dir):
    mock_run.return_value = Mock(returncode=0)

    result = solbuild.compile(contracts_dir, config=SolcConfig(system="Linux"))

    assert result.sources == ["GetSenderTest.sol"]
    assert mock_run.call_args.args[0][0] == "solc"


@patch("subprocess.run")
def test_compile_default_config(mock_run, contracts_dir):
    mock_run.return_value = Mock(returncode=0)

    result = solbuild.compile(contracts_dir)

    assert "--overwrite" in result.command


@patch("subprocess.run")
def test_link(mock_run, contracts_dir):
    mock_run.return_value = Mock(returncode=0)

    result = solbuild.link(
        [f"test.sol:TestLibrary:{ADDRESS}"],
        "LibraryTest.bin",
        contracts_dir,
        config=SolcConfig(system="Linux"),
    )

    assert result.command == [
        "solc", "--link", "--libraries", f"test.sol:TestLibrary:{ADDRESS}", "LibraryTest.bin"
    ]


@patch("subprocess.run")
def test_errors_are_raised_not_exited(mock_run, contracts_dir):
    """Failures reach the caller as exceptions; the interpreter keeps running."""
    mock_run.return_value = Mock(returncode=3)

    with pytest.raises(solbuild.ExecutionError) as exc_info:
        solbuild.compile(contracts_dir)

    assert isinstance(exc_info.value, solbuild.SolcError)
    assert exc_info.value.returncode == 3

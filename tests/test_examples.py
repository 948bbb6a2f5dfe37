"""
Tests for the example scripts.
"""
import logging
import pytest
import sys
import os
os.environ["XLA_PYTHON_CLIENT_PREALLOCATE"] = "false"

from examples import random_rollout
from gym_bridge.monitoring import LOGGER_NAMES


@pytest.fixture
def clean_loggers():
    yield
    for name in LOGGER_NAMES:
        logger = logging.getLogger(name)
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()


class TestRandomRollout:
    """Test the random rollout example end to end."""

    def test_cartpole_rollout(self, tmp_path, monkeypatch, capsys, clean_loggers):
        """Test a short CartPole rollout finishes and reports episodes."""
        pytest.importorskip('gymnasium')
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, 'argv', ['random_rollout.py', '--steps', '100', '--seed', '3'])

        random_rollout.main()

        out = capsys.readouterr().out
        assert 'GymEnv(name=' in out
        assert 'Episodes finished:' in out
        assert (tmp_path / 'logs' / 'gym_bridge.log').exists()

    def test_unknown_environment_exits(self, tmp_path, monkeypatch, capsys, clean_loggers):
        """Test an unknown id exits with status 1."""
        pytest.importorskip('gymnasium')
        monkeypatch.chdir(tmp_path)
        monkeypatch.setattr(sys, 'argv', ['random_rollout.py', '--env', 'NoSuchEnv-v0'])

        with pytest.raises(SystemExit) as excinfo:
            random_rollout.main()
        assert excinfo.value.code == 1
        assert 'Could not create NoSuchEnv-v0' in capsys.readouterr().out

"""Deterministic stand-ins for Gymnasium environments."""

import threading
import time
from types import SimpleNamespace

import numpy as np


def discrete(n):
    return SimpleNamespace(n=n)


def box(*shape):
    return SimpleNamespace(shape=tuple(shape))


class FakeEnv:
    """Minimal environment following the Gymnasium call convention."""

    def __init__(self, action_space=None, observation_space=None, step_result=None):
        self.action_space = action_space if action_space is not None else discrete(4)
        self.observation_space = observation_space if observation_space is not None else box(3)
        # Observations keep the shape the environment was built with
        self.shape = getattr(self.observation_space, 'shape', ())
        self.step_result = step_result
        self.reset_calls = []
        self.step_calls = []
        self.closed = 0

    def _observation(self, value):
        return np.full(self.shape, value, dtype=np.float64)

    def reset(self, seed=None):
        self.reset_calls.append(seed)
        return self._observation(float(seed % 7)), {'seed': seed}

    def step(self, action):
        self.step_calls.append(action)
        if self.step_result is not None:
            return self.step_result
        reward = float(len(self.step_calls))
        done = len(self.step_calls) % 3 == 0
        return self._observation(reward), reward, done, False, {}

    def close(self):
        self.closed += 1


class FakeRegistry:
    """Factory resolving names to prebuilt environments, like gymnasium.make."""

    def __init__(self, **envs):
        self.envs = envs
        self.made = []

    def __call__(self, name):
        self.made.append(name)
        if name not in self.envs:
            raise KeyError(f"Environment {name} doesn't exist")
        return self.envs[name]


class ConcurrencyProbe:
    """Records the peak number of threads inside the environment at once."""

    def __init__(self):
        self._lock = threading.Lock()
        self.active = 0
        self.peak = 0

    def __enter__(self):
        with self._lock:
            self.active += 1
            self.peak = max(self.peak, self.active)
        return self

    def __exit__(self, *exc):
        with self._lock:
            self.active -= 1
        return False


class SlowEnv(FakeEnv):
    """FakeEnv whose step lingers inside the call while holding a probe."""

    def __init__(self, probe, delay=0.002, **kwargs):
        super().__init__(**kwargs)
        self.probe = probe
        self.delay = delay

    def step(self, action):
        with self.probe:
            time.sleep(self.delay)
            return super().step(action)

"""Wrapper around a Gymnasium environment returning JAX tensors."""

import logging
import numbers
import operator
import numpy as np
import jax
from dataclasses import dataclass, replace
from typing import Any, Callable, Generic, Optional, Tuple, TypeVar

from gym_bridge.config import config
from gym_bridge.runtime import external_call, load_factory
from gym_bridge.tensors import extract_floats, to_tensor
from .actions import marshal_action
from .base_env import BaseRLEnvironment


logger = logging.getLogger('environments.gym_env')

A = TypeVar('A')

# Seeds are unsigned 64-bit integers
MAX_SEED = 2 ** 64


@dataclass
class Step(Generic[A]):
    """The return value for a step.

    ``done`` is the third element of the environment's step result. When the
    environment also reports a truncation flag (Gymnasium's fourth element)
    it is kept in ``truncated`` so time limits can be told apart from
    terminal states.
    """
    obs: jax.Array
    action: A
    reward: float
    done: bool
    truncated: bool = False

    def copy_with_obs(self, obs: jax.Array) -> 'Step[A]':
        """Return a copy of this step changing the observation tensor."""
        return replace(self, obs=obs)


def _as_size(value: Any) -> int:
    size = operator.index(value)
    if size < 0:
        raise ValueError(f"Space size must be non-negative, got {size}")
    return size


def _as_reward(value: Any) -> float:
    if isinstance(value, np.ndarray) and value.ndim == 0:
        value = value.item()
    if not isinstance(value, numbers.Real):
        raise TypeError(f"Reward must be a real number, got {type(value).__name__}")
    return float(value)


def _as_flag(value: Any) -> bool:
    if not isinstance(value, (bool, np.bool_)):
        raise TypeError(f"Done flag must be a boolean, got {type(value).__name__}")
    return bool(value)


def _truncation_flag(result: Any) -> bool:
    # Legacy 4-tuples carry the info dict here instead of a flag
    if len(result) > 3 and isinstance(result[3], (bool, np.bool_)):
        return bool(result[3])
    return False


class GymEnv(BaseRLEnvironment):
    """A session of one named Gymnasium environment.

    Every call into the environment holds the process-wide runtime lock and
    failures are raised as :class:`gym_bridge.errors.ExternalCallError`.
    Space metadata is read once at construction and cached.
    """

    def __init__(self, name: str, make: Optional[Callable[[str], Any]] = None):
        """Create a new session of the specified Gymnasium environment.

        Args:
            name: Registered environment id, e.g. 'CartPole-v1'
            make: Environment factory; defaults to the one named by the
                'gym.module' and 'gym.factory' settings (gymnasium.make)
        """
        self.name = name
        self._closed = False

        with external_call(f"create {name!r}"):
            if make is None:
                make = load_factory(config.get('gym.module'),
                                    config.get('gym.factory'))
            env = make(name)

            action_space = env.action_space
            try:
                n = action_space.n
            except AttributeError:
                self._action_space = _as_size(action_space.shape[0])
            else:
                self._action_space = _as_size(n)

            self._observation_space = tuple(
                _as_size(dim) for dim in env.observation_space.shape
            )

        self._env = env
        logger.info(
            f"Created {name}: action_space={self._action_space}, "
            f"observation_space={self._observation_space}"
        )

    def reset(self, seed: int) -> jax.Array:
        """Resets the environment, returning the observation tensor."""
        seed = operator.index(seed)
        if not 0 <= seed < MAX_SEED:
            raise ValueError(f"Seed must be an unsigned 64-bit integer, got {seed}")

        with external_call(f"reset {self.name!r}"):
            # reset returns (observation, info)
            obs = self._extract_observation(self._env.reset(seed=seed)[0])

        logger.debug(f"Reset {self.name} with seed={seed}")
        return to_tensor(obs)

    def step(self, action: A) -> Step[A]:
        """Applies an environment step using the specified action."""
        with external_call(f"step {self.name!r}"):
            result = self._env.step(marshal_action(action))
            obs = self._extract_observation(result[0])
            reward = _as_reward(result[1])
            done = _as_flag(result[2])
            truncated = _truncation_flag(result)

        logger.debug(f"Step {self.name}: reward={reward}, done={done}, truncated={truncated}")
        return Step(
            obs=to_tensor(obs),
            action=action,
            reward=reward,
            done=done,
            truncated=truncated,
        )

    def _extract_observation(self, value: Any) -> np.ndarray:
        obs = extract_floats(value)
        expected = int(np.prod(self._observation_space))
        if obs.size != expected:
            raise ValueError(
                f"Observation has {obs.size} elements, expected {expected} "
                f"for shape {self._observation_space}"
            )
        return obs

    def action_space(self) -> int:
        """Returns the number of allowed actions for this environment."""
        return self._action_space

    def observation_space(self) -> Tuple[int, ...]:
        """Returns the shape of the observation tensors."""
        return self._observation_space

    def close(self):
        """Close the underlying environment. Further calls are no-ops."""
        if self._closed:
            return
        with external_call(f"close {self.name!r}"):
            self._env.close()
        self._closed = True
        logger.info(f"Closed {self.name}")

    def __repr__(self) -> str:
        return (
            f"GymEnv(name={self.name!r}, action_space={self._action_space}, "
            f"observation_space={self._observation_space})"
        )

"""Base environment class for tensor-returning RL environments."""

from abc import ABC, abstractmethod
from typing import Any, Tuple


class BaseRLEnvironment(ABC):
    """Abstract base class for RL environments with standard interface."""

    @abstractmethod
    def reset(self, seed: int) -> Any:
        """Reset environment and return initial observation.

        Args:
            seed: Random seed for the episode

        Returns:
            Initial observation tensor
        """
        pass

    @abstractmethod
    def step(self, action: Any) -> Any:
        """Execute one step in the environment.

        Args:
            action: Action to execute

        Returns:
            Step result holding observation, action, reward and done flag
        """
        pass

    @abstractmethod
    def action_space(self) -> int:
        """Number of discrete actions, or size of the action vector."""
        pass

    @abstractmethod
    def observation_space(self) -> Tuple[int, ...]:
        """Shape of observations."""
        pass

    def close(self):
        """Release environment resources."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

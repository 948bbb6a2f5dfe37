"""Tensor-returning wrappers around Gymnasium environments."""

from .base_env import BaseRLEnvironment
from .gym_env import GymEnv, Step
from .actions import Marshalable, marshal_action

__all__ = ['BaseRLEnvironment', 'GymEnv', 'Step', 'Marshalable', 'marshal_action']

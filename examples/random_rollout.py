#!/usr/bin/env python3
"""Drive a Gymnasium environment with uniformly random actions."""

import argparse
import os
import sys
import numpy as np

# Add parent directory to path for imports
sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from environments import GymEnv
from gym_bridge.config import config
from gym_bridge.errors import ExternalCallError
from gym_bridge.monitoring import configure_logging


def sample_action(rng: np.random.Generator, action_space: int, continuous: bool):
    """Pick a random discrete index, or a vector in [-1, 1] for continuous spaces."""
    if continuous:
        return rng.uniform(-1.0, 1.0, size=action_space).astype(np.float32)
    return int(rng.integers(action_space))


def main():
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(description='Random rollout of a Gymnasium environment')
    parser.add_argument('--env', type=str, default='CartPole-v1',
                       help='Registered environment id (default: CartPole-v1)')
    parser.add_argument('--steps', type=int, default=200,
                       help='Number of steps to run (default: 200)')
    parser.add_argument('--seed', type=int, default=42,
                       help='Seed for the first reset (default: 42)')
    parser.add_argument('--continuous', action='store_true',
                       help='Sample continuous action vectors instead of indices')
    parser.add_argument('--config', type=str, default=None,
                       help='Path to configuration file (default: config/default.yaml)')

    args = parser.parse_args()

    if args.config:
        config.load_config(args.config)
    log_file = configure_logging()
    print(f"Logging to: {log_file}")

    try:
        env = GymEnv(args.env)
    except ExternalCallError as e:
        print(f"Could not create {args.env}: {e}")
        sys.exit(1)

    print(f"Environment: {env}")
    rng = np.random.default_rng(args.seed)

    with env:
        obs = env.reset(args.seed)
        episode, episode_reward, episode_rewards = 0, 0.0, []
        for _ in range(args.steps):
            step = env.step(sample_action(rng, env.action_space(), args.continuous))
            episode_reward += step.reward
            obs = step.obs
            if step.done or step.truncated:
                episode_rewards.append(episode_reward)
                episode += 1
                episode_reward = 0.0
                obs = env.reset(args.seed + episode)

    print(f"Last observation: {obs}")
    print(f"Episodes finished: {len(episode_rewards)}")
    if episode_rewards:
        print(f"Mean episode reward: {np.mean(episode_rewards):.2f}")


if __name__ == '__main__':
    main()

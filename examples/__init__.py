"""
Example scripts for the Gymnasium bridge.

This package contains:
- random_rollout.py: Drive an environment with random actions
"""

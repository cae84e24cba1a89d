# src/rl/policies/__init__.py
"""
Fixed autoplay policies for CatcherRLEnv. Each takes (obs, env, epsilon)
and returns an action index from src.rl.env.ACTIONS.
"""
from src.rl.policies.random import policy_random
from src.rl.policies.greedy import policy_greedy
from src.rl.policies.eps_greedy import policy_eps_greedy

__all__ = ["policy_random", "policy_greedy", "policy_eps_greedy"]

# src/rl/policies/eps_greedy.py
import numpy as np # type: ignore
from src.rl.policies.random import policy_random
from src.rl.policies.greedy import policy_greedy


def policy_eps_greedy(obs: np.ndarray, env, epsilon: float = 0.1) -> int:
    """
    Catch/dodge heuristic with noise: with probability epsilon take a random
    step (stay, left or right), otherwise follow policy_greedy.
    epsilon=0 plays exactly like greedy; epsilon=1 like random.
    """
    if epsilon <= 0.0:
        return policy_greedy(obs, env)
    if np.random.rand() < epsilon:
        return policy_random(obs, env)
    return policy_greedy(obs, env)

# src/rl/policies/random.py
import numpy as np # type: ignore


def policy_random(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Random policy: stay, left or right uniformly.
    Baseline for how long pure luck survives.
    """
    return int(np.random.randint(env.action_space_n))

# src/rl/policies/greedy.py
import numpy as np # type: ignore
from src.rl.env import N_NEAREST

STAY, LEFT, RIGHT = 0, 1, 2

# Bad food this low and this close (as fractions of the arena) gets dodged
DANGER_Y = 0.3
DANGER_DX = 0.17
# Close enough to a good food's center to stop moving
ALIGN_DX = 0.01


def decode_obs(obs: np.ndarray):
    """
    Matches env._obs() layout:
    [px_n, (dx_n, y_n, bad) * N_NEAREST, lives_n, level]
    Returns px_n and a list of (dx_n, y_n, is_bad) for the slots that hold an object.
    """
    values = obs.tolist()
    px_n = values[0]
    objects = []
    for k in range(N_NEAREST):
        dx_n, y_n, bad = values[1 + 3 * k: 4 + 3 * k]
        if y_n >= -0.5 or dx_n != 0.0 or bad != 0.0:
            objects.append((dx_n, y_n, bad > 0.5))
    return px_n, objects


def away_from(dx_n: float, px_n: float) -> int:
    """Step away from something at horizontal offset dx_n; bounce off the walls."""
    if dx_n >= 0:
        return LEFT if px_n > 0.0 else RIGHT
    return RIGHT if px_n < 1.0 else LEFT


def policy_greedy(obs: np.ndarray, env, epsilon: float = 0.0) -> int:
    """
    Greedy on the lowest good food with simple safety:
    - dodge any bad food that is low and roughly overhead
    - otherwise walk toward the lowest good food
    - otherwise stay put
    """
    px_n, objects = decode_obs(obs)

    # 1) dodge (objects are ordered lowest first)
    for dx_n, y_n, is_bad in objects:
        if is_bad and y_n > DANGER_Y and abs(dx_n) < DANGER_DX:
            return away_from(dx_n, px_n)

    # 2) chase
    for dx_n, y_n, is_bad in objects:
        if is_bad:
            continue
        if dx_n > ALIGN_DX:
            return RIGHT
        if dx_n < -ALIGN_DX:
            return LEFT
        return STAY

    # 3) nothing to do
    return STAY

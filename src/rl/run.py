# src/rl/run.py
from __future__ import annotations
import argparse
import csv
import logging
import os
from typing import Tuple

from src.rl.env import CatcherRLEnv
from src.rl.policies import policy_random, policy_greedy, policy_eps_greedy

MAX_STEPS = 100_000


# --------------------------
# Episode loop
# --------------------------
def run_episode(env: CatcherRLEnv, policy: str, epsilon: float,
                render: bool = False) -> Tuple[int, float, int, int]:
    """
    Run a single episode with a fixed (non-learning) policy:
    - random
    - greedy
    - eps-greedy

    Returns:
        steps: number of ticks taken
        total: total return (sum of rewards)
        score: final score from info["score"]
        level: final level from info["level"]
    """
    obs = env.reset()
    total = 0.0
    steps = 0
    info = {"score": 0, "level": 1}

    while True:
        if policy == "random":
            a = policy_random(obs, env)
        elif policy == "greedy":
            a = policy_greedy(obs, env)
        elif policy in ("eps-greedy", "epsilon-greedy"):
            a = policy_eps_greedy(obs, env, epsilon)
        else:
            raise ValueError(f"Unknown policy: {policy}")

        obs, r, done, info = env.step(a)
        total += r
        steps += 1
        if render:
            env.render()

        if done or steps >= MAX_STEPS:
            break

    return steps, total, info.get("score", 0), info.get("level", 1)


# --------------------------
# Main
# --------------------------
def main():
    parser = argparse.ArgumentParser(description="Autoplay the falling-food game headlessly.")
    parser.add_argument("--episodes", type=int, default=20)
    parser.add_argument(
        "--policy",
        type=str,
        default="greedy",
        choices=["random", "greedy", "eps-greedy"],
    )
    parser.add_argument(
        "--epsilon",
        type=float,
        default=0.1,
        help="epsilon for eps-greedy",
    )
    parser.add_argument("--seed", type=int, default=0)
    parser.add_argument(
        "--outdir",
        type=str,
        default="data/runs",
        help="CSV will be saved here",
    )
    parser.add_argument("--render", action="store_true", help="watch the episodes in a window")
    parser.add_argument("--log-level", type=str, default="WARNING")
    args = parser.parse_args()

    logging.basicConfig(level=args.log_level.upper(),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    os.makedirs(args.outdir, exist_ok=True)
    out_csv = os.path.join(args.outdir, f"autoplay_{args.policy}.csv")

    env = CatcherRLEnv(seed_value=args.seed, render_enabled=args.render)

    print(
        f"Running {args.episodes} episode(s) with "
        f"policy={args.policy} ε={args.epsilon} seed={args.seed}"
    )
    print("ep,steps,return,score,level")

    rows = [("ep", "steps", "return", "score", "level")]
    for ep in range(1, args.episodes + 1):
        steps, ret, score, level = run_episode(env, args.policy, args.epsilon, args.render)
        print(f"{ep},{steps},{ret:.3f},{score},{level}")
        rows.append((ep, steps, float(f"{ret:.6f}"), score, level))

    with open(out_csv, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerows(rows)

    env.close()
    print(f"\nSaved results → {out_csv}")


if __name__ == "__main__":
    main()

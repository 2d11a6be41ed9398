# /experiments/sanity_rollout.py
"""
Sanity rollouts for PlatformerEnv:
- Runs RANDOM and/or TINY-HEURISTIC policies over fixed seeds
- Writes an episodes CSV for notebook analysis
- Optionally saves per-episode action sequences for exact replay

Usage examples (from repo root):
  # Run both policies over 20 default seeds, frame_skip=4, save traces:
  python -m experiments.sanity_rollout --policies both --save-traces

  # Only heuristic, custom seeds:
  python -m experiments.sanity_rollout --policies heuristic --seeds 111,222,333

  # Quick random-only smoke with fewer steps:
  python -m experiments.sanity_rollout --policies random --steps 300 --out-dir /tmp/sanity
"""

from __future__ import annotations
import argparse
import csv
from pathlib import Path
from typing import List, Tuple

import numpy as np

from src.env.platformer_env import PlatformerEnv


# ------------------------ Policies ------------------------

def random_policy_init(action_seed: int):
    rng = np.random.RandomState(action_seed)
    def act(_obs: np.ndarray) -> np.ndarray:
        return np.array([rng.randint(0, 3), rng.randint(0, 2), rng.randint(0, 2)])
    return act

def tiny_heuristic_policy_init():
    """
    Very small rule:
      - always hold RIGHT (toward the flag);
      - jump when no jump has been used yet;
      - spend the double jump once the first one starts falling;
      - dash whenever the cooldown is clear.
    """
    def act(obs: np.ndarray) -> np.ndarray:
        vy, jumps_used, cooldown = obs[2], obs[3], obs[5]
        jump = 0
        if jumps_used == 0.0:
            jump = 1
        elif jumps_used < 1.0 and vy > 0.0:
            jump = 1
        dash = 1 if cooldown == 0.0 else 0
        return np.array([2, jump, dash])
    return act


# ------------------------ Rollout core ------------------------

def ensure_dir(p: Path):
    p.mkdir(parents=True, exist_ok=True)

def write_episode_row(csv_path: Path, header: List[str], row: List):
    exists = csv_path.exists()
    with csv_path.open("a", newline="") as f:
        w = csv.writer(f)
        if not exists:
            w.writerow(header)
        w.writerow(row)

def run_one_episode(policy_name: str,
                    seed: int,
                    frame_skip: int,
                    steps_limit: int,
                    save_traces: bool,
                    out_dir: Path) -> Tuple[int, float, float, bool, bool, int, bool]:
    """
    Returns: (ep_len, ret_sum, final_x, terminated, truncated, respawns, flag_reached)
    Also writes the action trace to disk if requested.
    """
    env = PlatformerEnv(frame_skip=frame_skip)

    if policy_name == "random":
        # Make action RNG seed a function of seed for determinism
        policy = random_policy_init(10_000 + seed)
    elif policy_name == "heuristic":
        policy = tiny_heuristic_policy_init()
    else:
        raise ValueError("Unknown policy")

    actions: List[np.ndarray] = []
    ret_sum = 0.0
    ep_len = 0
    term = trunc = False
    info = {}

    try:
        obs, info = env.reset(seed=seed)
        for _ in range(steps_limit):
            a = policy(obs)
            actions.append(a)
            obs, r, term, trunc, info = env.step(a)
            ret_sum += float(r)
            ep_len += 1
            if term or trunc:
                break
    finally:
        env.close()

    if save_traces:
        trace_dir = out_dir / "traces" / policy_name
        ensure_dir(trace_dir)
        np.save(trace_dir / f"{seed}_actions.npy", np.asarray(actions, dtype=np.int8))

    return (ep_len, ret_sum, float(info.get("x", 0.0)), bool(term), bool(trunc),
            int(info.get("respawns", 0)), bool(info.get("flag_reached", False)))


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--policies", type=str, default="both",
                    choices=["random", "heuristic", "both"],
                    help="Which policy to run")
    ap.add_argument("--seeds", type=str, default="",
                    help="Comma-separated seeds. If empty, uses 20 defaults: 101..120")
    ap.add_argument("--frame-skip", type=int, default=4,
                    help="Sim frames per decision step")
    ap.add_argument("--steps", type=int, default=10_000,
                    help="Hard cap on decision steps (env may truncate earlier)")
    ap.add_argument("--out-dir", type=str, default="experiments/runs",
                    help="Directory to store episodes.csv and traces/")
    ap.add_argument("--save-traces", action="store_true",
                    help="Save action sequences for replay")
    args = ap.parse_args()

    out_dir = Path(args.out_dir)
    ensure_dir(out_dir)

    if args.seeds.strip():
        seeds = [int(s) for s in args.seeds.split(",") if s.strip()]
    else:
        seeds = list(range(101, 121))

    episodes_csv = out_dir / "episodes.csv"
    header = [
        "policy_name", "seed", "frame_skip",
        "episode_len_decisions", "return_sum", "final_x",
        "terminated", "truncated", "respawns", "flag_reached",
    ]

    to_run = ["random", "heuristic"] if args.policies == "both" else [args.policies]

    print(f"Running policies={to_run} on {len(seeds)} seeds (frame_skip={args.frame_skip})")
    print(f"Writing summaries to {episodes_csv}")

    for policy_name in to_run:
        for seed in seeds:
            ep_len, ret_sum, final_x, terminated, truncated, respawns, reached = run_one_episode(
                policy_name=policy_name,
                seed=seed,
                frame_skip=args.frame_skip,
                steps_limit=args.steps,
                save_traces=args.save_traces,
                out_dir=out_dir
            )
            write_episode_row(episodes_csv, header, [
                policy_name, seed, args.frame_skip,
                ep_len, f"{ret_sum:.2f}", f"{final_x:.1f}",
                int(terminated), int(truncated), respawns, int(reached),
            ])
            print(f"[{policy_name}] seed={seed}  len={ep_len}  x={final_x:.1f}  "
                  f"ret={ret_sum:.2f}  respawns={respawns}  flag={reached}")

    print("✓ Sanity rollouts complete")


if __name__ == "__main__":
    main()

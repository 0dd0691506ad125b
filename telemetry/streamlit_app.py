from __future__ import annotations

import argparse
import json
import os
import time
from typing import Any, Dict, List

import matplotlib.pyplot as plt
import pandas as pd
import streamlit as st


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(add_help=False)
    parser.add_argument(
        "--log-path",
        type=str,
        default="telemetry_logs/mission.jsonl",
        help="Path to mission telemetry JSONL log file.",
    )
    return parser.parse_args()


def load_telemetry(path: str, max_rows: int = 5000) -> pd.DataFrame:
    if not os.path.exists(path):
        return pd.DataFrame()
    records: List[Dict[str, Any]] = []
    with open(path, "r", encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if not line:
                continue
            try:
                records.append(json.loads(line))
            except json.JSONDecodeError:
                continue
    if not records:
        return pd.DataFrame()
    df = pd.json_normalize(records)
    return df.tail(max_rows)


def latest_per_rover(df: pd.DataFrame) -> pd.DataFrame:
    """Last status or error record of each rover."""
    if "event" not in df.columns:
        return pd.DataFrame()
    final = df[df["event"].isin(["status", "error"])]
    if final.empty:
        return final
    cols = [c for c in ["rover", "event", "status", "message", "position.x", "position.y", "orientation"] if c in final.columns]
    return final.groupby("rover").tail(1)[cols].reset_index(drop=True)


def main() -> None:
    args = parse_args()

    st.set_page_config(page_title="Plateau Mission Telemetry", layout="wide")
    st.title("Plateau Mission Telemetry")

    status_placeholder = st.empty()
    map_fig = st.empty()
    table_placeholder = st.empty()

    refresh_interval = st.sidebar.slider("Refresh interval (s)", 0.5, 5.0, 1.0, 0.5)

    while True:
        df = load_telemetry(args.log_path)
        if df.empty:
            status_placeholder.info(f"Waiting for telemetry at '{args.log_path}'...")
            time.sleep(refresh_interval)
            continue

        status_placeholder.success(f"Streaming from '{args.log_path}' ({len(df)} records)")

        # Rover paths on the grid
        with map_fig.container():
            fig, ax = plt.subplots()
            if {"rover", "position.x", "position.y"}.issubset(df.columns):
                moves = df[df["event"].isin(["land", "step", "status"])].dropna(subset=["position.x", "position.y"])
                for name, path in moves.groupby("rover", sort=False):
                    ax.plot(path["position.x"], path["position.y"], "-o", label=name)
                errors = df[df["event"] == "error"]
                if not errors.empty and "position.x" in errors.columns:
                    ax.scatter(errors["position.x"], errors["position.y"], c="r", marker="x", label="Error")
            ax.set_aspect("equal", adjustable="box")
            ax.grid(True)
            ax.set_xlabel("x")
            ax.set_ylabel("y")
            ax.set_title("Rover Paths")
            ax.legend(loc="upper right")
            map_fig.pyplot(fig)
            plt.close(fig)

        table_placeholder.dataframe(latest_per_rover(df))

        time.sleep(refresh_interval)


if __name__ == "__main__":
    main()

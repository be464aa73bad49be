# graph_search/benchmarks/plot_results.py
# Bar charts of results.json: graph search vs. tree search for each algorithm.
from __future__ import annotations
import io
import json
import math
from pathlib import Path
from typing import Any, Dict, List

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt

HERE = Path(__file__).parent
RESULTS_JSON = HERE / "results.json"
OUT_DIR = HERE

def _load_rows(path: Path = RESULTS_JSON) -> List[Dict[str, Any]]:
    if not path.exists():
        raise SystemExit(f"Missing {path}. Run: python -m graph_search.benchmarks.run_all")
    data = json.loads(path.read_text())
    rows = data.get("results", [])
    if not rows:
        raise SystemExit("No rows to plot.")
    return rows

def _grouped_bar(ax, rows, metric, title, ylabel):
    """Side-by-side bars per algorithm, one colour per strategy."""
    algos = list(dict.fromkeys(r["algo"].split("/")[0] for r in rows))
    strategies = list(dict.fromkeys(r["strategy"] for r in rows))
    width = 0.8 / max(len(strategies), 1)
    x = list(range(len(algos)))

    for i, strat in enumerate(strategies):
        by_algo = {r["algo"].split("/")[0]: r.get(metric) for r in rows if r["strategy"] == strat}
        vals = [by_algo.get(a) for a in algos]
        xs = [xi + i * width for xi in x]
        ax.bar(xs, [0 if v is None else v for v in vals], width, label=strat)
        for xi, v in zip(xs, vals):
            label = "n/a" if v is None else (f"{v:.3f}" if isinstance(v, float) else f"{v}")
            ax.text(xi, 0 if v is None else v, label, ha="center", va="bottom", fontsize=7)

    ax.set_title(title)
    ax.set_ylabel(ylabel)
    ax.set_xticks([xi + width * (len(strategies) - 1) / 2 for xi in x])
    ax.set_xticklabels(algos, rotation=20, ha="right")
    ax.legend()

def _fmt_table(rows):
    # Markdown table
    lines = [
        "| Problem | Algorithm | Strategy | OK | Cost | Nodes Expanded | Max Frontier | Time (s) |",
        "|---|---|---|---|---:|---:|---:|---:|",
    ]
    def fnum(x):
        if isinstance(x, (int, float)) and not (isinstance(x, float) and math.isinf(x)):
            return f"{x:.6f}" if isinstance(x, float) else f"{x}"
        return "n/a"
    for r in rows:
        lines.append(
            f"| {r.get('problem', '?')} | {r['algo']} | {r.get('strategy', '?')} | "
            f"{'yes' if r.get('success') else 'no'} | {fnum(r.get('cost'))} | "
            f"{fnum(r.get('nodes_expanded'))} | {fnum(r.get('max_frontier_size'))} | "
            f"{fnum(r.get('time_s'))} |"
        )
    return "\n".join(lines)

def fig_to_png_bytes(fig) -> bytes:
    buf = io.BytesIO()
    fig.savefig(buf, format="png", dpi=160)
    return buf.getvalue()

def render(rows, out_dir: Path = OUT_DIR) -> List[Path]:
    """Write results.md plus one PNG per (problem, metric); returns the written paths."""
    written = []
    md_path = out_dir / "results.md"
    md_path.write_text(_fmt_table(rows))
    written.append(md_path)

    for problem in dict.fromkeys(r.get("problem", "?") for r in rows):
        subset = [r for r in rows if r.get("problem", "?") == problem]
        for metric, title, ylabel in (
            ("nodes_expanded", "Nodes Expanded (lower is better)", "nodes"),
            ("max_frontier_size", "Peak Frontier Size", "nodes"),
        ):
            fig, ax = plt.subplots(figsize=(7, 4))
            _grouped_bar(ax, subset, metric, f"{problem}: {title}", ylabel)
            fig.tight_layout()
            path = out_dir / f"{problem}_{metric}.png"
            path.write_bytes(fig_to_png_bytes(fig))
            plt.close(fig)
            written.append(path)
    return written

def main():
    for path in render(_load_rows()):
        print(f"Wrote {path}")

if __name__ == "__main__":
    main()

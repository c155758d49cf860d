#!/usr/bin/env python3
from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import lunisolar


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "lunisolar[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "lunisolar[diagnostics]"') from e


@dataclass(frozen=True)
class Style:
    label: str
    calendar: str
    marker: str
    size: float
    hollow: bool
    color: str = "0.15"
    lw: float = 1.2
    alpha: float = 0.95


DEFAULT_STYLES: Dict[str, Style] = {
    "chinese": Style("Chinese (UTC+8)", "chinese", marker="o", size=22, hollow=False),
    "korean": Style("Korean (UTC+9)", "korean", marker="o", size=95, hollow=True),
    "vietnamese": Style("Vietnamese (UTC+7)", "vietnamese", marker="s", size=80, hollow=True),
}


def parse_calendars(s: str) -> List[str]:
    out = [x.strip() for x in s.split(",") if x.strip()]
    if not (1 <= len(out) <= 3):
        raise SystemExit("--calendars must contain 1 to 3 comma-separated calendars")
    return out


def leap_month_of(calendar: str, Y: int) -> int:
    return int(lunisolar.new_year_day(Y, calendar=calendar, as_date=False)["leap_month"])


def build_points(np, calendar: str, start_year: int, end_year: int) -> Tuple["np.ndarray", "np.ndarray"]:
    xs, ys = [], []
    for Y in range(start_year, end_year + 1):
        lm = leap_month_of(calendar, Y)
        if lm:
            xs.append(Y)
            ys.append(lm)
    return np.array(xs, dtype=int), np.array(ys, dtype=int)


def draw_cells(ax, np, start_year: int, end_year: int, *, edge: str, lw: float) -> None:
    """One white cell per (year, month) slot; markers sit at the cell centres."""
    from matplotlib.colors import ListedColormap

    years = end_year - start_year + 1
    ax.pcolormesh(
        np.arange(start_year - 0.5, end_year + 1.5, 1.0),
        np.arange(0.5, 13.5, 1.0),
        np.zeros((12, years)),
        shading="flat",
        cmap=ListedColormap(["white"]),
        vmin=0, vmax=1,
        edgecolors=edge,
        linewidth=lw,
        zorder=0,
    )
    ax.set_xlim(start_year - 0.5, end_year + 0.5)
    ax.set_ylim(0.5, 12.5)
    ax.grid(False)


def label_axes(ax, start_year: int, end_year: int, year_step: int) -> None:
    ax.tick_params(axis="both", which="both", length=0)
    ax.set_xticks(list(range(start_year, end_year + 1, year_step)))
    ax.set_xlabel("Related Gregorian year")
    ax.set_yticks(list(range(1, 13)))
    ax.set_ylabel("Leap month number")


def marker_paint(st: Style) -> Dict[str, object]:
    if st.hollow:
        return {"facecolors": "none", "edgecolors": st.color, "linewidths": st.lw}
    return {"c": st.color, "linewidths": 0.0}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(
        description="Leap-month barcode diagram across lunisolar variants."
    )
    p.add_argument("--start-year", type=int, default=1960)
    p.add_argument("--end-year", type=int, default=2030)
    p.add_argument("--out", default="leapmonth_barcode.png")
    p.add_argument("--title", default="Leap month pattern across variants")
    p.add_argument(
        "--calendars",
        default="chinese,korean,vietnamese",
        help="Comma list of 1-3 calendars to plot (default: chinese,korean,vietnamese).",
    )
    p.add_argument("--year-step", type=int, default=5, help="Label every k years (default: 5).")
    p.add_argument("--cell-edge", default="0.88", help="Cell border color (matplotlib gray string).")
    p.add_argument("--cell-lw", type=float, default=0.6, help="Cell border line width.")
    args = p.parse_args(argv)

    start_year, end_year = args.start_year, args.end_year
    if end_year < start_year:
        raise SystemExit("--end-year must be >= --start-year")

    styles: List[Style] = []
    for c in parse_calendars(args.calendars):
        if c not in DEFAULT_STYLES:
            raise SystemExit(f"Unknown calendar '{c}'. Known: {sorted(DEFAULT_STYLES.keys())}")
        styles.append(DEFAULT_STYLES[c])

    np = _need_numpy()
    plt = _need_matplotlib()

    fig, ax = plt.subplots(figsize=(16, 3.6))
    draw_cells(ax, np, start_year, end_year, edge=args.cell_edge, lw=float(args.cell_lw))
    label_axes(ax, start_year, end_year, max(1, int(args.year_step)))

    for st in styles:
        x, m = build_points(np, st.calendar, start_year, end_year)
        ax.scatter(x, m, s=st.size, marker=st.marker, label=st.label, alpha=st.alpha, zorder=5, **marker_paint(st))

    ax.set_title(args.title)
    ax.legend(loc="center left", bbox_to_anchor=(1.01, 0.5), frameon=False)
    fig.tight_layout()
    fig.savefig(args.out, dpi=250)
    print(f"Saved: {args.out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())

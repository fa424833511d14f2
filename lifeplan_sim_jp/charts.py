"""Chart generation for life plan simulation results."""

import platform
from pathlib import Path

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import matplotlib.ticker as ticker

from lifeplan_sim_jp.params import YearResult

YEN_PER_MAN = 10_000

SCENARIO_COLORS = {
    "低成長": "#d62728",   # red
    "標準": "#1f77b4",     # blue
    "高成長": "#2ca02c",   # green
}


def _setup_japanese_font():
    """Configure matplotlib to use a Japanese font."""
    system = platform.system()
    if system == "Darwin":
        font_family = "Hiragino Sans"
    elif system == "Linux":
        font_family = "Noto Sans CJK JP"
    else:
        font_family = "sans-serif"
    plt.rcParams["font.family"] = font_family
    plt.rcParams["axes.unicode_minus"] = False


def _format_oku_axis(ax: plt.Axes):
    """Add 億円 labels on Y axis (secondary tick labels). Primary axis is 万円."""
    ax.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x:,.0f}")
    )
    ax_right = ax.secondary_yaxis("right")
    ax_right.yaxis.set_major_formatter(
        ticker.FuncFormatter(lambda x, _: f"{x / 10000:.1f}億" if x != 0 else "0")
    )
    ax_right.set_ylabel("")


def _man(values: list[int]) -> list[float]:
    return [v / YEN_PER_MAN for v in values]


def _save(fig, output_path: Path, stem: str, name: str) -> Path:
    output_path.mkdir(parents=True, exist_ok=True)
    suffix = f"-{name}" if name else ""
    filepath = output_path / f"{stem}{suffix}.png"
    fig.tight_layout()
    fig.savefig(filepath, dpi=150)
    plt.close(fig)
    return filepath


def plot_assets(results: list[YearResult], output_path: Path, name: str = "") -> Path:
    """Line chart of cumulative assets by year, shortfall years shaded red.

    Returns:
        Path to the generated PNG file (assets{-name}.png).
    """
    if not results:
        raise ValueError("No results for asset chart")
    _setup_japanese_font()

    years = [r.year for r in results]
    assets = _man([r.cumulative_assets for r in results])

    fig, ax = plt.subplots(figsize=(14, 7))
    ax.plot(years, assets, color="#1f77b4", linewidth=2, label="累積資産")
    ax.fill_between(years, assets, 0, where=[a < 0 for a in assets],
                    color="#d62728", alpha=0.25, label="資産不足")
    ax.axhline(0, color="black", linewidth=1.0)

    # 年齢を上軸に表示
    offset = results[0].year - results[0].age
    ax_top = ax.secondary_xaxis("top", functions=(lambda y: y - offset, lambda a: a + offset))
    ax_top.set_xlabel("年齢")

    ax.set_xlabel("年")
    ax.set_ylabel("累積資産（万円）")
    ax.set_title("資産推移")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_oku_axis(ax)
    return _save(fig, output_path, "assets", name)


def plot_cashflow(results: list[YearResult], output_path: Path, name: str = "") -> Path:
    """Stacked expenses + education costs against income and child allowance."""
    if not results:
        raise ValueError("No results for cashflow chart")
    _setup_japanese_font()

    years = [r.year for r in results]
    fig, ax = plt.subplots(figsize=(14, 7))
    ax.stackplot(
        years,
        _man([r.expenses for r in results]),
        _man([r.education_costs for r in results]),
        labels=["生活費・住居費等", "教育費"],
        colors=["#66c2a5", "#fc8d62"],
        alpha=0.75,
    )
    ax.plot(years, _man([r.income for r in results]), color="#1f77b4", linewidth=2, label="収入")
    ax.plot(years, _man([r.child_allowance for r in results]), color="#9467bd",
            linewidth=1.5, linestyle="--", label="児童手当")
    ax.plot(years, _man([r.net_cash_flow for r in results]), color="#d62728",
            linewidth=1.5, linestyle=":", label="年間収支")
    ax.axhline(0, color="black", linewidth=1.0)

    ax.set_xlabel("年")
    ax.set_ylabel("年間キャッシュフロー（万円）")
    ax.set_title("収入と支出の推移")
    ax.legend(loc="upper left", fontsize=9)
    ax.grid(True, alpha=0.3)
    return _save(fig, output_path, "cashflow", name)


def plot_comparison(
    series: dict[str, list[YearResult]], output_path: Path, name: str = "",
) -> Path:
    """Cumulative assets of several plans or scenarios on one axis."""
    valid = {label: results for label, results in series.items() if results}
    if not valid:
        raise ValueError("No results for comparison chart")
    _setup_japanese_font()

    fig, ax = plt.subplots(figsize=(14, 7))
    for label, results in valid.items():
        color = SCENARIO_COLORS.get(label)
        ax.plot(
            [r.year for r in results],
            _man([r.cumulative_assets for r in results]),
            label=label, color=color, linewidth=2,
        )
    ax.axhline(0, color="black", linewidth=1.0)
    ax.set_xlabel("年")
    ax.set_ylabel("累積資産（万円）")
    ax.set_title("資産推移の比較")
    ax.legend(loc="upper left")
    ax.grid(True, alpha=0.3)
    _format_oku_axis(ax)
    return _save(fig, output_path, "comparison", name)

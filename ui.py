"""
UI components and visualization helpers.
"""

from typing import List, Optional

import pandas as pd
import plotly.express as px
import streamlit as st

from config import (
    COLOR_MAP,
    DIE_GLYPHS,
    HISTORY_DISPLAY_LIMIT,
    MONTE_CARLO_ROLLS,
    MONTE_CARLO_TRIALS,
    SHARE_SUMMARY_ROLLS,
    STATS_FOCUS_SUMS,
    SUMS,
)
from models import DiceRoll, GameState
from bag import compute_probabilities, count_remaining, expected_probabilities
from analytics import (
    bag_fill_ratios,
    frequency_by_sum,
    most_frequent_sums,
    observed_percentages,
    recent_rolls,
)
from simulation import compare_methods


def format_share_summary(state: GameState) -> str:
    """Plain-text summary of the session for copying."""
    lines: List[str] = ["Fair Catan roll summary", ""]
    lines.append(f"Bag size: {state.bag_size}")
    lines.append(f"Rolls this cycle: {state.roll_count}")
    lines.append(f"Remaining in bag: {len(state.bag)} / {state.bag_size}")
    lines.append("")

    if state.history:
        lines.append("Last rolls:")
        for r in state.history[-SHARE_SUMMARY_ROLLS:]:
            lines.append(f"  {r.die1} + {r.die2} = {r.sum}")

    return "\n".join(lines)


def render_dice_display(dice: Optional[DiceRoll]) -> None:
    """Show the current roll, or a prompt if there is none."""
    if dice is None:
        st.markdown("### 🎲 Roll to start")
        return
    col_d1, col_d2, col_sum = st.columns(3)
    col_d1.metric("Die 1", f"{DIE_GLYPHS[dice.die1]} {dice.die1}")
    col_d2.metric("Die 2", f"{DIE_GLYPHS[dice.die2]} {dice.die2}")
    col_sum.metric("Sum", dice.sum)


def render_probability_chart(bag: List[int]) -> None:
    """Plot next-roll probability per sum against the theoretical 2d6 curve."""
    current = compute_probabilities(bag)
    expected = expected_probabilities()
    rows = []
    for s in SUMS:
        rows.append({"Sum": s, "Series": "Next roll", "Probability (%)": current[s]})
        rows.append({"Sum": s, "Series": "Expected", "Probability (%)": expected[s]})

    df = pd.DataFrame(rows)
    fig = px.bar(
        df,
        x="Sum",
        y="Probability (%)",
        color="Series",
        barmode="group",
        color_discrete_map=COLOR_MAP,
    )
    fig.update_layout(
        xaxis=dict(dtick=1, title="Sum"),
        height=350,
        margin=dict(l=10, r=10, t=30, b=10),
        legend_title_text="",
    )
    st.plotly_chart(fig, use_container_width=True)


def render_bag_status(bag: List[int], bag_size: int) -> None:
    """Remaining copies of each sum and how full its slot is."""
    st.markdown("#### Bag status")
    counts = count_remaining(bag)
    ratios = bag_fill_ratios(bag, bag_size)
    df = pd.DataFrame(
        {
            "Sum": SUMS,
            "Remaining": [counts[s] for s in SUMS],
            "Fill": [ratios[s] for s in SUMS],
        }
    )
    st.dataframe(
        df,
        use_container_width=True,
        hide_index=True,
        column_config={
            "Fill": st.column_config.ProgressColumn("Fill", min_value=0.0, max_value=1.0, format="%.2f"),
        },
    )
    st.caption(f"{len(bag)} / {bag_size} left in bag")


def render_roll_history(history: List[DiceRoll]) -> None:
    """Newest-first table of the last rolls."""
    n = len(history)
    title = "#### History"
    if n > 0:
        title += f" (last {min(n, HISTORY_DISPLAY_LIMIT)} of {n})"
    st.markdown(title)

    if n == 0:
        st.write("*No rolls yet*")
        return

    data = [
        {"#": number, "Dice": f"{DIE_GLYPHS[r.die1]} {DIE_GLYPHS[r.die2]}", "Sum": r.sum}
        for number, r in recent_rolls(history)
    ]
    st.dataframe(pd.DataFrame(data), use_container_width=True, hide_index=True, height=240)


def render_stats_card(history: List[DiceRoll]) -> None:
    """Roll count, most frequent sums and expected vs observed for the common sums."""
    st.markdown("#### Cycle stats")
    n = len(history)
    col_count, col_top = st.columns(2)
    col_count.metric("Rolls this cycle", n)

    tied, max_count = most_frequent_sums(history)
    if tied:
        col_top.metric(
            "Most frequent",
            ", ".join(str(s) for s in tied),
            help=f"{max_count}x ({max_count / n * 100:.1f}%)",
        )
    else:
        col_top.metric("Most frequent", "—")

    if n == 0:
        return

    expected = expected_probabilities()
    observed = observed_percentages(history)
    freq = frequency_by_sum(history)
    df = pd.DataFrame(
        [
            {
                "Sum": s,
                "Rolled": freq[s],
                "Expected (%)": round(expected[s], 1),
                "Observed (%)": round(observed[s], 1),
            }
            for s in STATS_FOCUS_SUMS
        ]
    )
    st.dataframe(df, use_container_width=True, hide_index=True)


def render_simulation_panel(bag_size: int) -> None:
    """Monte Carlo comparison of bag rolling against independent dice."""
    st.write(
        f"Average worst-case gap between observed and expected frequencies over "
        f"{MONTE_CARLO_TRIALS} runs of {MONTE_CARLO_ROLLS} rolls."
    )
    if st.button("Run comparison"):
        result = compare_methods(MONTE_CARLO_ROLLS, MONTE_CARLO_TRIALS, bag_size)
        df = pd.DataFrame(
            [
                {"Method": f"Bag of {bag_size}", "Mean max deviation (pp)": result["bag"]},
                {"Method": "Independent dice", "Mean max deviation (pp)": result["independent"]},
            ]
        )
        st.dataframe(df, use_container_width=True, hide_index=True)

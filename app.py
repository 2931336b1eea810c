"""
Main Streamlit application.
"""

import logging

import streamlit as st

from config import BAG_SIZES, DEFAULT_BAG_SIZE, LOG_LEVEL, STATE_PATH
from models import GameState
from game_logic import needs_rollover, reset, resize, roll, undo
from storage import load_or_create, save_state

from ui import (
    format_share_summary,
    render_bag_status,
    render_dice_display,
    render_probability_chart,
    render_roll_history,
    render_simulation_panel,
    render_stats_card,
)

logger = logging.getLogger("fair_dice.app")


def _commit(state: GameState) -> None:
    """Make ``state`` the session state and persist it."""
    st.session_state["game_state"] = state
    save_state(state, STATE_PATH)


def _on_bag_size_selected() -> None:
    selected = st.session_state["bag_size_select"]
    if selected != st.session_state["game_state"].bag_size:
        st.session_state["pending_bag_size"] = selected


def _confirm_bag_size() -> None:
    size = st.session_state["pending_bag_size"]
    _commit(resize(st.session_state["game_state"], size))
    st.session_state["pending_bag_size"] = None
    st.session_state["notice"] = f"Bag size changed to {size}, new cycle started."


def _cancel_bag_size() -> None:
    st.session_state["pending_bag_size"] = None
    st.session_state["bag_size_select"] = st.session_state["game_state"].bag_size


def run_app() -> None:
    """Run the main Streamlit application."""
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    st.set_page_config(page_title="Fair Catan Dice", layout="wide")
    st.title("Fair Catan Dice")
    st.caption("2d6 rolls drawn from a shuffled bag with the exact dice distribution.")

    # Initialize session state
    if "game_state" not in st.session_state:
        state = load_or_create(STATE_PATH, DEFAULT_BAG_SIZE)
        st.session_state["game_state"] = state
        st.session_state["bag_size_select"] = state.bag_size
        st.session_state["pending_bag_size"] = None
        st.session_state["confirm_reset"] = False
        st.session_state["notice"] = None
        logger.info("session started with %d rolls, bag size %d", state.roll_count, state.bag_size)

    st.selectbox(
        "Bag size",
        BAG_SIZES,
        key="bag_size_select",
        on_change=_on_bag_size_selected,
    )
    if st.session_state["pending_bag_size"] is not None:
        st.warning(
            f"Changing the bag size to {st.session_state['pending_bag_size']} "
            "discards this cycle's rolls."
        )
        col_yes, col_no = st.columns(2)
        col_yes.button("Change bag size", on_click=_confirm_bag_size)
        col_no.button("Keep current size", on_click=_cancel_bag_size)

    # Controls
    col_roll, col_undo, col_reset = st.columns([1, 1, 1])

    with col_roll:
        if st.button("🎲 Roll", type="primary"):
            state = st.session_state["game_state"]
            if needs_rollover(state):
                st.session_state["notice"] = "Bag was empty, a fresh bag was shuffled."
            new_state, _ = roll(state)
            _commit(new_state)
            if needs_rollover(new_state):
                st.session_state["notice"] = "Bag is empty. The next roll starts a new bag."

    with col_undo:
        state = st.session_state["game_state"]
        if st.button("↩️ Undo", disabled=not state.can_undo):
            _commit(undo(state))
            st.session_state["notice"] = "Last roll undone."

    with col_reset:
        if st.button("🔁 Reset cycle"):
            st.session_state["confirm_reset"] = True
        if st.session_state["confirm_reset"]:
            st.warning("Start a new cycle? All rolls will be cleared.")
            col_yes, col_no = st.columns(2)
            if col_yes.button("Reset"):
                _commit(reset(st.session_state["game_state"]))
                st.session_state["confirm_reset"] = False
                st.session_state["notice"] = "Cycle reset."
                st.rerun()
            if col_no.button("Cancel"):
                st.session_state["confirm_reset"] = False
                st.rerun()

    if st.session_state["notice"]:
        st.info(st.session_state["notice"])
        st.session_state["notice"] = None

    state: GameState = st.session_state["game_state"]

    # Layout: dice + chart, then dashboards
    dice_col, chart_col = st.columns([1, 1.6])

    with dice_col:
        render_dice_display(state.last_roll)
        render_stats_card(state.history)

    with chart_col:
        st.subheader("Next roll probability")
        render_probability_chart(state.bag)

    bag_col, history_col = st.columns([1.2, 1])

    with bag_col:
        render_bag_status(state.bag, state.bag_size)

    with history_col:
        render_roll_history(state.history)

    with st.expander("Share summary", expanded=False):
        st.code(format_share_summary(state), language=None)

    with st.expander("Bag vs independent dice", expanded=False):
        render_simulation_panel(state.bag_size)


if __name__ == "__main__":
    run_app()

"""
Cribbage Quiz Web App
Streamlit interface for guessing hand scores.
"""

import streamlit as st
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from cribbage_quiz.engine.game import GuessingGame
from cribbage_quiz.engine.guess import Correct, Incorrect
from cribbage_quiz.pretty import PrettyPrinter
from cribbage_quiz.repl import HELP_TEXT

# Page config
st.set_page_config(
    page_title="Cribbage Quiz",
    page_icon="🃏",
    layout="centered"
)

st.title("🃏 Cribbage Quiz")
st.markdown("*Score the hand: a number, or the melds in compact notation*")

# One game per browser session
if "game" not in st.session_state:
    game = GuessingGame()
    game.prep_next_turn()
    st.session_state.game = game
    st.session_state.last_result = None

game = st.session_state.game

# Sidebar for stats and help
st.sidebar.header("Session")
st.sidebar.metric("Streak", game.streak)
st.sidebar.metric("Best Streak", game.history.best_streak)
with st.sidebar.expander("Notation help"):
    st.code(HELP_TEXT.strip(), language=None)

st.subheader("Your hand")
st.code(PrettyPrinter.hand_string(game.current_hand), language=None)

resolved = st.session_state.last_result is not None

with st.form("guess_form", clear_on_submit=True):
    guess = st.text_input("Your guess?", disabled=resolved)
    submitted = st.form_submit_button("Guess", type="primary", disabled=resolved)

if submitted and guess.strip():
    result = game.handle_guess(guess.strip())
    if result is None:
        st.warning("❓ I couldn't understand you, sorry!")
    else:
        st.session_state.last_result = result
        st.rerun()

result = st.session_state.last_result
if result is not None:
    if isinstance(result, Correct):
        st.success(f"⭐️ You got it! Your streak is now: {game.streak}")
    elif isinstance(result, Incorrect):
        st.error(f"❌ Nope! {result.brief}")
        if result.details:
            st.code(result.details, language=None)
    else:
        raise TypeError(f"Expected a GuessResult but got {result!r}")

    st.markdown("**Score breakdown**")
    st.code(PrettyPrinter.score_string(game.current_hand.score_board), language=None)

    if st.button("🎲 Next hand", use_container_width=True):
        game.prep_next_turn()
        st.session_state.last_result = None
        st.rerun()

# Turn history
if game.history.records:
    st.divider()
    st.subheader("📜 History")
    for record in reversed(game.history.records):
        icon = "✅" if record.outcome == "correct" else "❌"
        with st.expander(f"{icon} Turn {record.turn}: {record.hand}  →  {record.guess}"):
            if record.brief:
                st.write(record.brief)
            if record.details:
                st.code(record.details, language=None)
            st.caption(f"Streak after: {record.streak}")

# Footer
st.divider()
st.markdown("*Built with the Cribbage Quiz engine*")

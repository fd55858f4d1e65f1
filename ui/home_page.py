# ui/home_page.py
import streamlit as st

from securepass.settings import AMBIGUOUS_CHARACTERS, SPECIAL_JSON_SAFE


def render():
    st.markdown("## securepass")
    st.markdown(
        "Cryptographically secure passwords and random strings from the OS CSPRNG, "
        "with rejection sampling (no modulo bias) and at least one character of every selected class."
    )
    st.markdown(f"- Symbols: `{SPECIAL_JSON_SAFE}` (safe inside JSON strings)")
    st.markdown(f"- Look-alike filter removes: `{AMBIGUOUS_CHARACTERS}`")
    st.info("Pick a page from the **sidebar** to start.")

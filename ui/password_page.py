# ui/password_page.py
from __future__ import annotations
from typing import List

import pandas as pd
import streamlit as st

from securepass.api import (
    SecurePassError,
    generate_many,
    uri_safe_password,
)
from securepass.charset_utils import build_charsets

MIN_LENGTH = 4
MAX_LENGTH = 128
MAX_QUANTITY = 50


def result_frame(passwords: List[str], show_plain: bool = False) -> pd.DataFrame:
    shown = passwords if show_plain else ["•" * len(p) for p in passwords]
    df = pd.DataFrame({"Password": shown, "Length": [len(p) for p in passwords]})
    df.index = range(1, len(df) + 1)
    df.index.name = "#"
    return df


def render():
    st.subheader("🔐 Password Generator")

    colL, colR = st.columns([3, 2])
    with colL:
        mode = st.radio("Mode", ["Password", "URI-safe"], horizontal=True)
        length = st.slider("Password length", MIN_LENGTH, MAX_LENGTH, 24, 1)
        count = st.number_input("Quantity", min_value=1, max_value=MAX_QUANTITY, value=5, step=1)
        show_plain = st.checkbox("Show characters (unmasked)", value=False)
    with colR:
        uri_safe = mode == "URI-safe"
        st.markdown("**Character sets**")
        use_lower = st.checkbox("a–z", value=True, disabled=uri_safe)
        use_upper = st.checkbox("A–Z", value=True, disabled=uri_safe)
        use_digits = st.checkbox("0–9", value=True, disabled=uri_safe)
        use_special = st.checkbox("Symbols (!@#$%^*…)", value=True, disabled=uri_safe)

        st.markdown("**Filters**")
        exclude_ambiguous = st.checkbox("Exclude look-alike (I l 1 O 0 …)", value=False)

    if uri_safe:
        use_lower, use_upper, use_digits, use_special = True, True, True, False

    gen = st.button("🎲 Generate", type="primary")

    if gen:
        try:
            with build_charsets(use_lower, use_upper, use_digits, use_special, exclude_ambiguous) as charsets:
                st.caption(
                    f"Alphabet: {len(charsets.combined)} chars across {len(charsets)} required groups"
                )

            if uri_safe:
                passwords = [uri_safe_password(int(length), exclude_ambiguous) for _ in range(int(count))]
            else:
                passwords = generate_many(
                    int(count), int(length),
                    use_lower, use_upper, use_digits, use_special, exclude_ambiguous,
                )
            st.dataframe(result_frame(passwords, show_plain))
        except SecurePassError as e:
            st.error(f"Generation error: {e}")

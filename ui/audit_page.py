# ui/audit_page.py
from __future__ import annotations

import pandas as pd
import streamlit as st

from securepass.audit_utils import UniformityReport, audit_sampler


def report_frame(report: UniformityReport) -> pd.DataFrame:
    df = pd.DataFrame({"Count": report.counts})
    df["Expected"] = report.expected
    df["Deviation"] = df["Count"] - df["Expected"]
    df.index.name = "Index"
    return df


def render():
    st.subheader("📊 Sampler audit")
    st.caption("Draws indices in [0, n) from the unbiased sampler and checks the counts with a chi-squared test.")

    col1, col2 = st.columns(2)
    with col1:
        n = st.number_input("Alphabet size (n)", min_value=2, max_value=1024, value=62, step=1)
    with col2:
        samples = st.number_input("Samples", min_value=1_000, max_value=500_000, value=50_000, step=1_000)

    if st.button("Run audit"):
        report = audit_sampler(int(n), int(samples))
        df = report_frame(report)
        st.bar_chart(df["Count"])
        st.dataframe(df)

        verdict = "uniform" if report.passes() else "NOT uniform"
        msg = f"χ² = {report.chi2:.1f} (df = {report.df}), p ≈ {report.p_value:.4f} → {verdict}"
        if report.passes():
            st.success(msg)
        else:
            st.warning(msg)

import logging

import pandas as pd
import streamlit as st

from burnout_check.services import form_state
from burnout_check.utils.config import APP_TITLE, LOG_LEVEL
from burnout_check.utils.questions import DIMENSION_LABELS, DISPLAY_ORDER, OPTIONS, QUESTIONS
from burnout_check.utils.scoring import RISK_BAR_LABELS, as_percent

logging.basicConfig(level=LOG_LEVEL)

# -----------------------------
# Basic config
# -----------------------------
st.set_page_config(
    page_title=APP_TITLE,
    layout="centered",
    initial_sidebar_state="collapsed",
)

st.markdown(
    """
    <style>
    @import url('https://fonts.googleapis.com/css2?family=Inter:wght@300;400;500;600;700;800&display=swap');

    * {
        font-family: 'Inter', sans-serif;
    }

    .big-title {
        font-size: 2.6rem;
        font-weight: 800;
        color: #2d3748;
        margin-bottom: 0.5rem;
        text-align: center;
    }

    .subtitle {
        font-size: 1.1rem;
        color: #6c757d;
        margin-bottom: 2rem;
        text-align: center;
    }

    .question-text {
        font-weight: 600;
        color: #2d3748;
    }

    .risk-bar-labels {
        display: flex;
        justify-content: space-between;
        color: #718096;
        font-size: 0.85rem;
    }
    </style>
    """,
    unsafe_allow_html=True,
)

# -----------------------------
# Session state
# -----------------------------
# Widget keys carry a version so "Start Over" rebuilds the radios unselected
if "form" not in st.session_state:
    st.session_state.form = form_state.reset()
    st.session_state.form_version = 0


def widget_key(question_id: str) -> str:
    return f"{question_id}_{st.session_state.form_version}"


def on_answer(question_id: str):
    value = st.session_state[widget_key(question_id)]
    if value is not None:
        st.session_state.form = form_state.answer(st.session_state.form, question_id, value)


def on_submit():
    st.session_state.form = form_state.submit(st.session_state.form)


def on_reset():
    st.session_state.form = form_state.reset()
    st.session_state.form_version += 1


option_labels = {opt.value: opt.label for opt in OPTIONS}

# -----------------------------
# Header
# -----------------------------
st.markdown(f"<div class='big-title'>{APP_TITLE}</div>", unsafe_allow_html=True)
st.markdown(
    "<div class='subtitle'>Answer a few questions about your recent experience.</div>",
    unsafe_allow_html=True,
)

# -----------------------------
# Questions
# -----------------------------
for number, q in enumerate(QUESTIONS, start=1):
    st.markdown(f"<div class='question-text'>{number}. {q.text}</div>", unsafe_allow_html=True)
    st.radio(
        q.text,
        options=list(option_labels),
        format_func=option_labels.get,
        index=None,
        horizontal=True,
        key=widget_key(q.id),
        on_change=on_answer,
        args=(q.id,),
        label_visibility="collapsed",
    )

state = st.session_state.form

if state.error:
    st.error(state.error)

col_submit, col_reset = st.columns(2)
with col_submit:
    st.button("View My Risk Level", on_click=on_submit, use_container_width=True)
with col_reset:
    if state.submitted:
        st.button("Start Over", on_click=on_reset, use_container_width=True)

# -----------------------------
# Results
# -----------------------------
if state.submitted:
    result = state.result
    percentage = as_percent(result.normalized_score)
    risk = result.risk

    st.markdown("<br>", unsafe_allow_html=True)
    st.subheader("Your Burnout Risk")

    # bar fill takes the risk colour
    st.markdown(
        "<style>"
        ".stProgress > div > div > div > div, "
        "[data-testid='stProgress'] div[role='progressbar'] > div > div > div "
        f"{{ background-color: {risk.color}; }}"
        "</style>",
        unsafe_allow_html=True,
    )
    st.progress(percentage)
    st.markdown(
        "<div class='risk-bar-labels'>"
        + "".join(f"<span>{label}</span>" for label in RISK_BAR_LABELS)
        + "</div>",
        unsafe_allow_html=True,
    )
    st.markdown(
        f"Score: **{percentage}%** – "
        f"<span style='color: {risk.color}; font-weight: 600;'>{risk.label}</span>",
        unsafe_allow_html=True,
    )
    st.write(risk.description)

    st.markdown("#### Areas to watch")
    dimension_rows = [
        {"Area": DIMENSION_LABELS[d], "Risk (%)": as_percent(result.dimension_scores[d])}
        for d in DISPLAY_ORDER
        if d in result.dimension_scores
    ]
    for row in dimension_rows:
        st.markdown(f"- **{row['Area']}:** {row['Risk (%)']}% risk")

    df_dims = pd.DataFrame(dimension_rows).set_index("Area")
    st.bar_chart(df_dims)

    st.markdown("#### Personalized Tips")
    for line in result.advice:
        st.write(line)

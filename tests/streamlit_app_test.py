"""Form UI: radios, inline error, results section and Start Over."""

import pytest
from streamlit.testing.v1 import AppTest

from burnout_check.services.assessment_service import INCOMPLETE_MESSAGE
from burnout_check.utils.questions import QUESTIONS
from burnout_check.utils.scoring import ADVICE, BALANCED_ADVICE, HIGH_RISK, MODERATE_RISK

APP_PATH = "../streamlit_app.py"


@pytest.fixture
def app():
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    assert not at.exception
    return at


def markdown_text(at):
    return "\n".join(m.value for m in at.markdown)


def answer_all(at, value_for):
    for radio, q in zip(at.radio, QUESTIONS):
        radio.set_value(value_for(q))
    return at.run()


def test_initial_form(app):
    assert len(app.radio) == len(QUESTIONS)
    assert all(r.value is None for r in app.radio)
    assert [b.label for b in app.button] == ["View My Risk Level"]
    assert len(app.error) == 0


def test_empty_submission_shows_inline_error(app):
    app.button[0].click().run()

    assert [e.value for e in app.error] == [INCOMPLETE_MESSAGE]
    assert [b.label for b in app.button] == ["View My Risk Level"]
    assert "Your Burnout Risk" not in [s.value for s in app.subheader]


def test_all_threes_scores_moderate(app):
    answer_all(app, lambda q: 3)
    app.button[0].click().run()

    text = markdown_text(app)
    assert len(app.error) == 0
    assert MODERATE_RISK.label in text
    assert "Score: **50%**" in text
    assert BALANCED_ADVICE in text
    assert [b.label for b in app.button] == ["View My Risk Level", "Start Over"]


def test_high_risk_colours_bar_and_lists_every_tip(app):
    answer_all(app, lambda q: 1 if q.reverse else 5)
    app.button[0].click().run()

    text = markdown_text(app)
    assert HIGH_RISK.label in text
    assert f"background-color: {HIGH_RISK.color}" in text
    for tip in ADVICE.values():
        assert tip in text


def test_start_over_clears_radios_and_result(app):
    answer_all(app, lambda q: 3)
    app.button[0].click().run()

    app.button[1].click().run()

    assert len(app.radio) == len(QUESTIONS)
    assert all(r.value is None for r in app.radio)
    assert [b.label for b in app.button] == ["View My Risk Level"]
    assert MODERATE_RISK.label not in markdown_text(app)

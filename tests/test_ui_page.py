from pathlib import Path

from streamlit.testing.v1 import AppTest

APP_PATH = str(Path(__file__).resolve().parents[1] / "heart_form" / "ui" / "app.py")


def test_page_renders_every_field():
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()

    assert not at.exception
    assert {widget.key for widget in at.text_input} == {
        "field_age", "field_trestbps", "field_chol", "field_thalach",
    }
    assert len(at.selectbox) == 9
    assert all(widget.value is None for widget in at.selectbox)


def test_submitting_empty_form_shows_field_errors():
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()

    at.button(key="predict").click().run()

    controller = at.session_state["controller"]
    assert len(controller.field_errors) == 13
    assert controller.ui_state.status == "idle"
    assert not at.error


def test_reset_clears_inputs():
    at = AppTest.from_file(APP_PATH, default_timeout=30).run()
    at.text_input(key="field_age").input("54")
    at.selectbox(key="field_sex").select_index(1)

    at.button(key="reset").click().run()

    assert at.text_input(key="field_age").value == ""
    assert at.selectbox(key="field_sex").value is None
    assert at.session_state["controller"].form_state["age"] == ""

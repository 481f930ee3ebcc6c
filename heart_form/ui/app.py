import asyncio
import logging

import streamlit as st

from heart_form.containers import Container
from heart_form.schemas.fields import FIELD_SPECS, FieldSpec
from heart_form.services.form_controller import FormController
from heart_form.ui.presentation import (
    bar_fraction,
    build_risk_gauge,
    format_percentage,
    heart_color,
    risk_headline,
)
from heart_form.utils.logger import setup_logger

logger = logging.getLogger(__name__)

DISCLAIMER = (
    "This tool is for informational purposes only. "
    "Always consult with healthcare professionals for medical advice."
)

# Streamlit page configuration
st.set_page_config(
    page_title="Heart Disease Risk Predictor",
    page_icon="❤️",
    layout="centered"
)


@st.cache_resource
def init_container() -> Container:
    container = Container()
    setup_logger(container.config().LOG_LEVEL)
    logger.info("Container initialized")
    return container


def get_controller() -> FormController:
    """Return the form controller of the current browser session"""
    if "controller" not in st.session_state:
        st.session_state.controller = init_container().form_controller()
    return st.session_state.controller


def widget_key(spec: FieldSpec) -> str:
    return f"field_{spec.key}"


def _sync_form_state(controller: FormController):
    for spec in FIELD_SPECS:
        controller.set_value(spec.key, st.session_state.get(widget_key(spec)) or "")


def _on_submit():
    controller = get_controller()
    _sync_form_state(controller)
    # only enters Loading; the request is sent once the disabled button is on screen
    controller.begin_submit()


def _on_reset():
    get_controller().reset()
    # dropping the widget state brings every control back to its empty default
    for spec in FIELD_SPECS:
        st.session_state.pop(widget_key(spec), None)


def _render_numeric(spec: FieldSpec):
    st.text_input(
        spec.label,
        key=widget_key(spec),
        placeholder=f"Enter {spec.label.lower()}",
        help=spec.help_text
    )


def _render_enumerated(spec: FieldSpec):
    st.selectbox(
        spec.label,
        options=spec.kind.codes,
        index=None,
        format_func=spec.kind.label_for,
        placeholder=f"Select {spec.label.lower()}",
        key=widget_key(spec),
        help=spec.help_text
    )


FIELD_RENDERERS = {
    "numeric": _render_numeric,
    "enumerated": _render_enumerated,
}


def render_field(spec: FieldSpec, controller: FormController):
    FIELD_RENDERERS[spec.kind.type](spec)
    error = controller.field_errors.get(spec.key)
    if error:
        st.markdown(f":red[{error}]")


def render_header(controller: FormController):
    title_col, icon_col = st.columns([5, 1])
    with title_col:
        st.title("Heart Disease Risk Predictor")
        st.write("Enter patient medical data to assess heart disease risk")
    with icon_col:
        st.markdown(
            f"<div style='font-size: 48px; color: {heart_color(controller.ui_state)};'>&#9829;</div>",
            unsafe_allow_html=True
        )


def render_form(controller: FormController):
    with st.form("prediction_form"):
        columns = st.columns(2)
        for index, spec in enumerate(FIELD_SPECS):
            with columns[index % 2]:
                render_field(spec, controller)

        submit_col, reset_col = st.columns(2)
        with submit_col:
            st.form_submit_button(
                "Processing" if controller.is_loading else "Predict Risk",
                type="primary",
                disabled=controller.is_submit_disabled,
                on_click=_on_submit,
                key="predict"
            )
        with reset_col:
            st.form_submit_button("Reset Form", on_click=_on_reset, key="reset")


def render_outcome(controller: FormController):
    state = controller.ui_state

    if state.status in ("error", "result"):
        st.divider()

    if state.status == "error":
        st.error(f"**Error**  \n{state.message}")

    elif state.status == "result":
        result = state.result
        alert = st.error if result.prediction == 1 else st.success
        alert(
            f"**{risk_headline(result)}**  \n"
            f"Risk Level: {format_percentage(result.probability.positive)}"
        )
        st.progress(bar_fraction(result.probability.positive))
        st.plotly_chart(build_risk_gauge(result))


def send_pending_request(controller: FormController):
    with st.spinner("Processing"):
        asyncio.run(controller.send_pending())
    st.rerun()


def main():
    controller = get_controller()
    render_header(controller)
    render_form(controller)
    if controller.has_pending_request:
        send_pending_request(controller)
    render_outcome(controller)
    st.caption(DISCLAIMER)


main()

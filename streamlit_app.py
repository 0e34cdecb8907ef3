"""Streamlit page for the paraphrasing tool.

Talks to the relay over HTTP only; the provider API key never reaches this process.
"""

import asyncio
import json

import streamlit as st
import streamlit.components.v1 as components

from paraphraser.client.form import ParaphraseForm
from paraphraser.client.relay_client import RelayClient
from paraphraser.models.completion import ParaphraseMode
from paraphraser.models.form import NotificationLevel
from paraphraser.settings import ClientSettings

TOAST_ICONS = {
    NotificationLevel.SUCCESS: ":material/check_circle:",
    NotificationLevel.ERROR: ":material/error:",
    NotificationLevel.WARNING: ":material/warning:",
}

st.set_page_config(page_title="AI Paraphrasing Tool", page_icon=":memo:")


def _get_form() -> ParaphraseForm:
    if "form" not in st.session_state:
        settings = ClientSettings()
        st.session_state.form = ParaphraseForm(
            RelayClient(settings.relay_url, timeout=settings.request_timeout),
            template=settings.prompts.paraphrase_template,
        )
    return st.session_state.form


def _show_notifications(form: ParaphraseForm) -> None:
    for notification in form.drain_notifications():
        st.toast(notification.message, icon=TOAST_ICONS[notification.level])


def _copy_to_clipboard(text: str) -> None:
    components.html(
        f"<script>navigator.clipboard.writeText({json.dumps(text)});</script>",
        height=0,
    )


form = _get_form()

st.title("AI Paraphrasing Tool")
st.write(
    "Enter the text you want to paraphrase below, select a paraphrase mode, "
    "and click on the Paraphrase button to see the results!"
)

st.text_area(
    "Text",
    key="original_text",
    height=300,
    placeholder="Enter text to paraphrase",
    label_visibility="collapsed",
)
form.original_text = st.session_state.original_text
if form.word_count_label:
    st.markdown(f"**{form.word_count_label}**")

st.selectbox(
    "Paraphrase mode",
    list(ParaphraseMode),
    key="paraphrase_mode",
    format_func=lambda mode: mode.value,
)
form.set_mode(st.session_state.paraphrase_mode)

if st.button("Paraphrase", type="primary", disabled=form.loading):
    with st.spinner("Paraphrasing..."):
        asyncio.run(form.submit())

if form.paraphrased_text:
    header, copy_column = st.columns([6, 1])
    header.subheader("Paraphrased Text")
    if copy_column.button("Copy", help="Copy"):
        copied = form.copy_output()
        if copied:
            _copy_to_clipboard(copied)
    st.code(form.paraphrased_text, language=None, wrap_lines=True)

_show_notifications(form)

st.caption("Built with Streamlit, FastAPI, and OpenAI")

import streamlit as st

from config.logger import setup_logging
from config.settings import settings
from frontend.controller import (
    UploadController,
    Status,
    Processing,
    Success,
    Error,
)
from frontend.client import VIDEO_FILENAME, fetch_video
from frontend.messages import t

setup_logging(settings.LOG_LEVEL)


def get_controller() -> UploadController:
    if "controller" not in st.session_state:
        st.session_state["controller"] = UploadController()
    # Bumped on reset so the uploader and text area come back empty
    st.session_state.setdefault("widget_nonce", 0)
    return st.session_state["controller"]


def render_status(box, status: Status) -> None:
    if isinstance(status, Processing):
        box.info(f"⏳ {status.message}")
    elif isinstance(status, Success):
        box.success(status.message)
    elif isinstance(status, Error):
        box.error(status.message)
    else:
        box.empty()


def _on_upload(key: str) -> None:
    uploaded = st.session_state.get(key)
    # Removing the file from the widget is not a reset; only the button resets
    if uploaded is not None:
        get_controller().select_file(uploaded)


def _on_generate() -> None:
    ctrl = get_controller()
    # Callbacks run before the script, so take the prompt straight from the widget
    ctrl.set_prompt(st.session_state.get(f"prompt_{st.session_state['widget_nonce']}", ""))
    # Only flip to Processing here; the request runs after the button is drawn disabled
    if ctrl.begin_submit():
        st.session_state["pending"] = True


def _on_reset() -> None:
    get_controller().reset()
    st.session_state["widget_nonce"] += 1
    st.session_state.pop("video_download", None)


def video_bytes(video_url: str):
    cached = st.session_state.get("video_download")
    if cached and cached[0] == video_url:
        return cached[1]
    data = fetch_video(video_url)
    if data is not None:
        st.session_state["video_download"] = (video_url, data)
    return data


# ==========================
# Page
# ==========================
st.set_page_config(
    page_title="Photo to Video",
    page_icon="🎬",
    layout="centered",
)

st.markdown("""
<style>
.preview-image { max-width: 100%; max-height: 420px; border-radius: 10px; }
</style>
""", unsafe_allow_html=True)

ctrl = get_controller()
nonce = st.session_state["widget_nonce"]

st.title(t("title"))
st.info(f"{t('intro')}\n\n{t('intro_prompt')}")

# Drag-and-drop and click-to-browse are the same widget, so both land in _on_upload
upload_key = f"upload_{nonce}"
st.file_uploader(
    t("upload_label"),
    key=upload_key,
    on_change=_on_upload,
    args=(upload_key,),
)

if ctrl.selection is not None:
    st.subheader(t("preview"))
    st.markdown(
        f'<img src="{ctrl.selection.preview_url}" alt="Preview" class="preview-image">',
        unsafe_allow_html=True,
    )
    if ctrl.selection.size:
        w, h = ctrl.selection.size
        st.caption(f"{ctrl.selection.filename} · {w}×{h}")

prompt = st.text_area(
    t("prompt_label"),
    key=f"prompt_{nonce}",
    placeholder=t("prompt_placeholder"),
)
ctrl.set_prompt(prompt)

st.button(
    t("generating") if ctrl.is_processing else t("generate"),
    type="primary",
    disabled=not ctrl.can_submit,
    use_container_width=True,
    key="generate",
    on_click=_on_generate,
)

status_box = st.empty()
ctrl.listener = lambda status: render_status(status_box, status)
render_status(status_box, ctrl.status)

if st.session_state.pop("pending", False):
    with st.spinner(t("generating")):
        ctrl.finish_submit()
    # Redraw so the button comes back enabled with the result below it
    st.rerun()

if ctrl.video_url:
    st.subheader(t("result"))
    st.video(ctrl.video_url, autoplay=True, loop=True)
    data = video_bytes(ctrl.video_url)
    if data is not None:
        st.download_button(
            t("download"),
            data=data,
            file_name=VIDEO_FILENAME,
            mime="video/mp4",
        )
    else:
        st.link_button(t("download"), ctrl.video_url)

if ctrl.selection is not None or ctrl.video_url:
    st.button(t("reset"), on_click=_on_reset)

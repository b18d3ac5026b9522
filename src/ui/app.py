"""Streamlit web application for SEO article and keyword cluster generation."""

import streamlit as st

from src.chains.seo_generator import ToolMode
from src.ui.api_client import APIClient
from src.ui.controller import InteractionController
from src.ui.state import GenerationStatus, ViewMode
from src.ui.utils import (
    build_download_filename,
    format_mode_label,
    sanitize_html,
    split_meta_description,
)

# Page configuration
st.set_page_config(
    page_title="Rank Math SEO Writer",
    page_icon="✍️",
    layout="wide",
)

# Initialize API client
api_client = APIClient()


def get_controller() -> InteractionController:
    """Return the session's controller, creating it on first run."""
    if "controller" not in st.session_state:
        st.session_state.controller = InteractionController(api_client)
    return st.session_state.controller


def render_sidebar(controller: InteractionController):
    """Render sidebar with tool selection and API status."""
    with st.sidebar:
        st.title("⚙️ Công cụ")

        modes = list(ToolMode)
        selected = st.radio(
            "Chọn công cụ",
            options=modes,
            index=modes.index(controller.state.mode),
            format_func=format_mode_label,
        )
        if selected != controller.state.mode:
            controller.switch_mode(selected)

        st.subheader("Trạng thái API")
        if api_client.health_check():
            st.success("✅ API kết nối OK")
        else:
            st.error("❌ Không kết nối được API")
            st.caption("Hãy khởi động API server")

        st.divider()
        st.caption("Rank Math SEO Writer v0.1.0")


def render_article_form(controller: InteractionController):
    st.header("📝 Cấu hình bài viết")

    controller.update_field(
        "primary_keyword",
        st.text_input(
            "KEY BLOG (Keyword chính)",
            key="primary_keyword",
            placeholder="Ví dụ: Cách chọn máy lọc nước 2025",
        ),
    )
    controller.update_field(
        "secondary_keywords",
        st.text_area(
            "KEY PHỤ (Semantic keywords)",
            key="secondary_keywords",
            height=120,
            placeholder="Mỗi keyword một dòng...",
        ),
    )
    controller.update_field(
        "related_product",
        st.text_input(
            "SẢN PHẨM LIÊN QUAN",
            key="related_product",
            placeholder="Link hoặc tên sản phẩm...",
        ),
    )

    if st.button(
        "🚀 Bắt đầu viết bài chuẩn SEO",
        type="primary",
        disabled=not controller.can_submit(),
    ):
        with st.spinner("Đang viết bài (1800+ từ)... có thể mất 30-60 giây."):
            controller.submit()


def render_cluster_form(controller: InteractionController):
    st.header("🔎 Phân tích Keyword")

    controller.update_field(
        "seed_keyword",
        st.text_input(
            "KEY CHÍNH (Sản phẩm/Dịch vụ)",
            key="seed_keyword",
            placeholder="Ví dụ: Máy lọc nước ion kiềm",
        ),
    )
    st.info(
        "Hệ thống sẽ tự động phân tích và xây dựng bộ Keyword Cluster gồm: "
        "10-20 Key Phụ và 15-30 Topic Blog."
    )

    if st.button(
        "🚀 Xây dựng Keyword Cluster",
        type="primary",
        disabled=not controller.can_submit(),
    ):
        with st.spinner("Đang phân tích Cluster..."):
            controller.submit()


def render_output_section(controller: InteractionController):
    """Render the result, error notice or idle hint."""
    state = controller.state

    if state.status == GenerationStatus.FAILURE:
        st.error(f"❌ {state.error_message}")
        return

    if state.status != GenerationStatus.SUCCESS or state.result is None:
        st.info("👈 Nhập từ khóa và bấm nút để bắt đầu")
        return

    st.header("📄 Kết quả")

    view_labels = {ViewMode.PREVIEW: "Xem trước", ViewMode.CODE: "Mã HTML"}
    views = list(ViewMode)
    view = st.radio(
        "Hiển thị",
        options=views,
        index=views.index(state.view_mode),
        format_func=view_labels.get,
        horizontal=True,
    )
    controller.set_view_mode(view)

    body, meta_description = state.result, ""
    if state.mode == ToolMode.ARTICLE:
        body, meta_description = split_meta_description(state.result)

    if view == ViewMode.PREVIEW:
        # Generated markup is untrusted: sanitize before rendering
        st.markdown(sanitize_html(body), unsafe_allow_html=True)
        if meta_description:
            st.caption(f"Meta description ({len(meta_description)} ký tự)")
            st.write(meta_description)
    else:
        st.code(state.result, language="html")

    keyword = (
        state.form.primary_keyword
        if state.mode == ToolMode.ARTICLE
        else state.form.seed_keyword
    )
    st.download_button(
        label="📥 Tải xuống HTML",
        data=state.result,
        file_name=build_download_filename(state.mode, keyword),
        mime="text/html",
    )


def main():
    """Main application entry point."""
    controller = get_controller()

    st.title("✍️ Rank Math SEO Writer")
    st.caption("Viết bài chuẩn SEO và xây dựng Keyword Cluster với Gemini")

    render_sidebar(controller)

    col1, col2 = st.columns([1, 2])

    with col1:
        if controller.state.mode == ToolMode.ARTICLE:
            render_article_form(controller)
        else:
            render_cluster_form(controller)

    with col2:
        render_output_section(controller)


if __name__ == "__main__":
    main()

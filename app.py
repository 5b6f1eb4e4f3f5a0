"""
Schedule Allocations - Main Entry Point
Navigation hub for the administration pages
"""
import streamlit as st
from schedule_admin.config import config
import logging

# Configure logging
logging.basicConfig(
    level=config.get_app_setting('LOG_LEVEL', 'INFO'),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logging.getLogger("httpx").setLevel(logging.WARNING)
logger = logging.getLogger(__name__)

APP_TITLE = config.get_app_setting('APP_TITLE', 'Schedule Allocations')

# Page config
st.set_page_config(
    page_title=APP_TITLE,
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="expanded"
)


def main():
    st.markdown(f"""
    <div style="text-align: center; padding: 20px 0;">
        <div style="font-size: 4rem;">📅</div>
        <h1 style="margin: 10px 0 5px 0; color: #1f2937;">{APP_TITLE}</h1>
        <p style="color: #6b7280; margin: 0;">Professors, courses and weekly time slots</p>
    </div>
    """, unsafe_allow_html=True)

    col1, col2, col3 = st.columns([1, 1.5, 1])
    with col2:
        st.page_link("pages/1_📅_Allocations.py", label="Manage allocations", icon="📋",
                     use_container_width=True)
        st.caption(f"API: {config.get_api_config()['base_url']}")


if __name__ == "__main__":
    main()

"""
RSVP registry dashboard
Event attendance tracking
"""
import logging
import os

import streamlit as st

from rsvp_registry.config import configure_logging, get_settings
from rsvp_registry.services.notifier import build_notifier
from rsvp_registry.services.registry_service import ResponseRegistry
from rsvp_registry.services.snapshot_service import load_snapshot
from rsvp_registry.ui.dashboard import render_dashboard
from rsvp_registry.utils.exceptions import RegistryError

logger = logging.getLogger(__name__)

settings = get_settings()
configure_logging(settings)

# Streamlit page configuration
st.set_page_config(
    page_title=settings.event_title,
    page_icon="📅",
    layout="wide",
    initial_sidebar_state="collapsed"
)


def initialize_session_state():
    """Create one registry per browser session, seeded from the snapshot file if present."""
    if "registry" in st.session_state:
        return

    registry = ResponseRegistry(notifier=build_notifier(settings.notifier))

    if os.path.exists(settings.snapshot_file):
        try:
            registry.replace_all(load_snapshot(settings.snapshot_file))
        except (ValueError, RegistryError) as e:
            logger.error(f"Could not load snapshot {settings.snapshot_file}: {e}")

    st.session_state.registry = registry


def apply_custom_css():
    """Apply custom CSS styling."""
    st.markdown("""
        <style>
        .stApp {
            background: linear-gradient(135deg, #0f0c29 0%, #1a1a2e 50%, #16213e 100%);
        }

        #MainMenu {visibility: hidden;}
        footer {visibility: hidden;}

        [data-testid="stMetric"] {
            background: #16213e;
            border: 1px solid #2d3748;
            border-radius: 12px;
            padding: 12px 16px;
        }

        .stButton > button {
            border-radius: 8px;
        }
        </style>
    """, unsafe_allow_html=True)


def render_current_page():
    """Render the dashboard inside an error boundary."""
    try:
        render_dashboard(st.session_state.registry, event_title=settings.event_title)

    except Exception as e:
        logger.exception("Unhandled exception while rendering page")
        st.error("Something went wrong, please try again")

        with st.expander("🔍 Error details"):
            st.code(str(e))


def main():
    """Application entry point."""
    try:
        initialize_session_state()
        apply_custom_css()
        render_current_page()
    except Exception as e:
        logger.exception("Unhandled exception during app execution")
        st.error("The application hit an error, please reload the page")
        st.code(str(e))

        if st.button("🔄 Reset"):
            st.session_state.clear()
            st.rerun()


if __name__ == "__main__":
    main()

"""Dashboard UI component for collecting and reviewing RSVPs."""
import json
import logging
from typing import Dict, List

import streamlit as st

from rsvp_registry.models.participant import Participant
from rsvp_registry.models.response import ResponseRecord, ResponseStatus
from rsvp_registry.services.notifier import MemoryNotifier
from rsvp_registry.services.registry_service import ResponseRegistry
from rsvp_registry.services.snapshot_service import records_from_dicts, records_to_dicts
from rsvp_registry.ui.html_utils import html_block
from rsvp_registry.utils.date_utils import format_responded_at
from rsvp_registry.utils.exceptions import RegistryError

logger = logging.getLogger(__name__)

STATUS_CONFIG = {
    ResponseStatus.CONFIRMED: {"label": "Confirmed", "icon": "✅", "color": "#22d3ee"},
    ResponseStatus.DECLINED: {"label": "Declined", "icon": "❌", "color": "#f87171"},
    ResponseStatus.TENTATIVE: {"label": "Maybe", "icon": "🤔", "color": "#fbbf24"},
}

RSVP_FEEDBACK = "dashboard_rsvp_feedback"


def _render_status_badge(status: ResponseStatus) -> str:
    """Build the pill-shaped HTML badge for a status."""
    config = STATUS_CONFIG[status]
    return html_block(f"""
        <span style="
            display: inline-block;
            padding: 2px 10px;
            border-radius: 999px;
            background: {config['color']}33;
            border: 1px solid {config['color']};
            color: {config['color']};
            font-size: 0.8rem;
        ">{config['icon']} {config['label']}</span>
    """)


def _status_rows(records: List[ResponseRecord]) -> List[Dict[str, str]]:
    """Table rows for a list of records."""
    return [
        {
            "ID": record.participant.id,
            "Name": record.participant.name,
            "Email": record.participant.email,
            "Status": record.status.value,
            "Responded": format_responded_at(record.responded_at),
        }
        for record in records
    ]


def _show_feedback() -> None:
    """Render and clear the feedback left by the previous run."""
    feedback = st.session_state.pop(RSVP_FEEDBACK, None)
    if not feedback:
        return
    if feedback["type"] == "success":
        st.success(feedback["message"])
    else:
        st.error(feedback["message"])


def _render_counts(registry: ResponseRegistry) -> None:
    counts = registry.counts()
    cols = st.columns(4, gap="small")
    cols[0].metric("Total", counts.total)
    for col, status in zip(cols[1:], ResponseStatus):
        config = STATUS_CONFIG[status]
        col.metric(f"{config['icon']} {config['label']}", counts.for_status(status))


def _render_rsvp_form(registry: ResponseRegistry) -> None:
    """Render the form that records or updates one response."""
    with st.form("rsvp_form", clear_on_submit=True):
        st.markdown("### Submit an RSVP")
        id_col, name_col, email_col = st.columns(3)
        participant_id = id_col.text_input("Participant ID", placeholder="p1")
        name = name_col.text_input("Name")
        email = email_col.text_input("Email")
        status = st.radio(
            "Response",
            options=list(ResponseStatus),
            format_func=lambda s: f"{STATUS_CONFIG[s]['icon']} {STATUS_CONFIG[s]['label']}",
            horizontal=True,
        )

        if st.form_submit_button("Save RSVP", type="primary", use_container_width=True):
            participant = Participant(id=participant_id.strip(), name=name.strip(), email=email.strip())
            try:
                record = registry.upsert(participant, status)
            except RegistryError as e:
                st.session_state[RSVP_FEEDBACK] = {"type": "error", "message": f"❌ {e}"}
            else:
                st.session_state[RSVP_FEEDBACK] = {
                    "type": "success",
                    "message": f"🎉 {record.participant.display_label()} answered {record.status.value}",
                }
            st.rerun()


def _render_status_tabs(registry: ResponseRegistry) -> None:
    tabs = st.tabs(["All"] + [STATUS_CONFIG[s]["label"] for s in ResponseStatus])

    with tabs[0]:
        records = registry.list_all()
        if records:
            st.dataframe(_status_rows(records), use_container_width=True, hide_index=True)
        else:
            st.info("No RSVPs yet")

    for tab, status in zip(tabs[1:], ResponseStatus):
        with tab:
            st.markdown(_render_status_badge(status), unsafe_allow_html=True)
            records = registry.list_by_status(status)
            if records:
                st.dataframe(_status_rows(records), use_container_width=True, hide_index=True)
            else:
                st.caption("Nobody here yet")


def _render_snapshot_tools(registry: ResponseRegistry) -> None:
    """Upload a snapshot to replace all responses, or download the current one."""
    with st.expander("📦 Snapshot"):
        uploaded = st.file_uploader("Load snapshot (JSON)", type=["json"])
        if uploaded is not None and st.button("Replace all RSVPs", type="primary"):
            try:
                data = json.loads(uploaded.getvalue().decode("utf-8"))
                if isinstance(data, dict):
                    data = data.get("rsvps", [])
                registry.replace_all(records_from_dicts(data))
            except (ValueError, RegistryError) as e:
                logger.error(f"Snapshot upload failed: {e}")
                st.session_state[RSVP_FEEDBACK] = {"type": "error", "message": f"❌ {e}"}
            else:
                st.session_state[RSVP_FEEDBACK] = {
                    "type": "success",
                    "message": f"Loaded {len(registry)} RSVPs",
                }
            st.rerun()

        st.download_button(
            "Download snapshot",
            data=json.dumps({"rsvps": records_to_dicts(registry.list_all())}, ensure_ascii=False, indent=2),
            file_name="rsvps.json",
            mime="application/json",
        )


def _activity_lines(notifier, limit: int = 20) -> List[str]:
    """Newest-first activity lines, empty unless the notifier keeps them in memory."""
    if not isinstance(notifier, MemoryNotifier):
        return []
    return [f"[{level}] {message}" for level, message in reversed(notifier.activity[-limit:])]


def _render_activity(registry: ResponseRegistry) -> None:
    lines = _activity_lines(registry.notifier)
    if not lines:
        return
    with st.expander("📝 Activity"):
        st.code("\n".join(lines), language=None)


def render_dashboard(registry: ResponseRegistry, event_title: str = "Team Event") -> None:
    """
    Render the RSVP dashboard.

    Args:
        registry: Registry for the current browser session
        event_title: Heading shown above the counts
    """
    st.title(f"📅 {event_title}")
    _show_feedback()
    _render_counts(registry)
    _render_rsvp_form(registry)
    _render_status_tabs(registry)
    _render_snapshot_tools(registry)
    _render_activity(registry)

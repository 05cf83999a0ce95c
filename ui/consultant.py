import logging

import streamlit as st

from core.config import get_settings
from core.leads import LeadContact, LeadSubmissionError, submit_lead, validate_contact
from core.state import is_busy, set_busy
from dilemma.presets import DISCLAIMER
from export.csv_export import summary_csv_bytes
from export.pdf_export import PDF_FILE_NAME, build_results_pdf

logger = logging.getLogger(__name__)


def render_exports():
    """PDF and CSV downloads for the stored result."""
    result = st.session_state.get("result")
    if result is None:
        return
    profile = st.session_state["profile"]
    settings = get_settings()
    st.write("**Disclaimer**")
    st.caption(DISCLAIMER)
    c1, c2 = st.columns(2)
    try:
        pdf_bytes = build_results_pdf(
            profile,
            result,
            analysis=st.session_state.get("analysis", ""),
            branding={"title": settings.BRAND_NAME, "logo_path": settings.BRAND_LOGO_PATH},
            warnings=st.session_state.get("warnings"),
        )
    except Exception:
        logger.exception("PDF generation failed")
        c1.error("Sorry, we couldn't generate your PDF report. This issue has been logged.")
    else:
        c1.download_button(
            "Download PDF Report",
            data=pdf_bytes,
            file_name=PDF_FILE_NAME,
            mime="application/pdf",
        )
    c2.download_button(
        "Download CSV Summary",
        data=summary_csv_bytes(profile, result),
        file_name="move_summary.csv",
        mime="text/csv",
    )


def render_consultant_form():
    """Collect contact details and forward them with a results summary."""
    result = st.session_state.get("result")
    if result is None:
        return
    st.subheader("Talk to a Consultant")
    if st.session_state.get("lead_submitted"):
        st.success("Thank you! A consultant will reach out to you shortly.")
        return
    with st.form("consultant_form"):
        name = st.text_input("Full Name")
        email = st.text_input("Email Address")
        phone = st.text_input("Phone Number")
        submitted = st.form_submit_button("Submit", disabled=is_busy("lead"))
    if not submitted:
        return
    contact = LeadContact(name=name, email=email, phone=phone)
    errors = validate_contact(contact)
    if errors:
        for msg in errors.values():
            st.error(msg)
        return
    set_busy("lead", True)
    try:
        with st.spinner("Submitting..."):
            submit_lead(contact, st.session_state["profile"], result)
    except LeadSubmissionError as e:
        st.error(str(e))
    else:
        st.session_state["lead_submitted"] = True
        st.success("Thank you! A consultant will reach out to you shortly.")
    finally:
        set_busy("lead", False)

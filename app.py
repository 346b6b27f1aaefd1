"""Streamlit UI for the resume reviewer."""
from __future__ import annotations

import sys
from pathlib import Path

import streamlit as st

ROOT = Path(__file__).resolve().parent
sys.path.insert(0, str(ROOT))

from resume_review.errors import AlreadyAppliedError, InvalidResumeError, ResourceNotFoundError
from resume_review.log import get_logger
from resume_review.report import build_review_report
from resume_review.service import ResumeReviewService, upload_fingerprint
from resume_review.tracker import APPLICATION_STATUSES

log = get_logger(__name__)

_GLASS_CSS = """
<style>
[data-testid="stAppViewContainer"] {
    background: linear-gradient(135deg, #e8eaf6 0%, #f3e5f5 40%, #e0f2f1 100%);
}
.block-container {
    padding-top: 2rem;
}
[data-testid="stMetric"] {
    background: rgba(255,255,255,0.6);
    backdrop-filter: blur(12px);
    padding: 0.75rem 1rem;
    border-radius: 12px;
    border: 1px solid rgba(255,255,255,0.4);
    box-shadow: 0 4px 16px rgba(0,0,0,0.06);
}
.job-card {
    padding: 1rem 1.25rem;
    background: rgba(255,255,255,0.65);
    border: 1px solid rgba(74,144,217,0.25);
    border-radius: 12px;
    margin-bottom: 0.5rem;
}
h1, h2, h3 {
    color: #1a1a2e;
}
</style>
"""


@st.cache_resource
def _service() -> ResumeReviewService:
    return ResumeReviewService()


def _current_resume_id() -> int | None:
    return st.session_state.get("resume_id")


def _score_color(score: float) -> str:
    if score >= 80:
        return "green"
    if score >= 60:
        return "orange"
    return "red"


# ── Page: Review ─────────────────────────────────────────────────────────


def page_review() -> None:
    st.title("Resume Review")
    service = _service()

    uploaded = st.file_uploader(
        "Drop your resume here (PDF, DOCX, or TXT)",
        type=["pdf", "docx", "txt"],
    )

    upload_key = upload_fingerprint(uploaded.name, uploaded.getvalue()) if uploaded else None
    if upload_key and st.session_state.get("upload_key") != upload_key:
        with st.spinner("Analyzing your resume…"):
            try:
                resume = service.upload_resume(uploaded.name, uploaded.getvalue())
                service.generate_review_score(resume.id)
                service.generate_job_suggestions(resume.id)
            except InvalidResumeError as exc:
                st.error(str(exc))
                return
        st.session_state["resume_id"] = resume.id
        st.session_state["upload_key"] = upload_key
        st.success(f"Uploaded **{uploaded.name}**")

    resume_id = _current_resume_id()
    if resume_id is None:
        st.info("Upload a resume to get a score and job suggestions.")
        return

    try:
        resume = service.get_resume(resume_id)
        review = service.get_review_score(resume_id)
    except ResourceNotFoundError:
        st.session_state.pop("resume_id", None)
        st.warning("That resume is no longer available. Upload it again.")
        return

    st.divider()
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Overall", f"{review.overall_score:.0f}")
    c2.metric("Format", f"{review.format_score:.0f}")
    c3.metric("Content", f"{review.content_score:.0f}")
    c4.metric("Keywords", f"{review.keyword_score:.0f}")
    st.progress(int(review.overall_score) / 100)

    with st.expander("Feedback", expanded=True):
        st.markdown(review.feedback.replace("\n", "  \n"))
    with st.expander("Suggestions", expanded=True):
        st.markdown(review.suggestions.replace("\n", "  \n"))

    if st.button("Re-run review", use_container_width=True):
        service.generate_review_score(resume_id)
        st.rerun()

    report = build_review_report(
        resume, review, service.get_job_suggestions(resume_id),
        service.get_applications_for_resume(resume_id),
    )
    st.download_button("Download report", report, file_name=f"review_{Path(resume.file_name).stem}.md")


# ── Page: Jobs ───────────────────────────────────────────────────────────


def page_jobs() -> None:
    st.title("Job Suggestions")
    service = _service()
    resume_id = _current_resume_id()
    if resume_id is None:
        st.info("Upload a resume on the Review page first.")
        return

    if st.button("Regenerate suggestions"):
        service.generate_job_suggestions(resume_id)
        st.rerun()

    for s in service.get_job_suggestions(resume_id):
        st.markdown(
            f'<div class="job-card"><h4>{s.job_title} — {s.company}</h4>'
            f"<p>{s.description}</p>"
            f"<p><b>Skills:</b> {s.required_skills}<br>"
            f"<b>Location:</b> {s.location} · {s.employment_type}</p></div>",
            unsafe_allow_html=True,
        )
        c1, c2, c3 = st.columns([1, 2, 1])
        c1.markdown(f":{_score_color(s.match_score)}[**{s.match_score:.0f}% match**]")
        c2.markdown(f"[Job posting]({s.job_url})")
        if c3.button("Apply", key=f"apply_{s.id}"):
            try:
                service.apply_for_job(s.id, resume_id)
                st.success(f"Applied to {s.job_title} @ {s.company}")
            except AlreadyAppliedError as exc:
                st.warning(str(exc))


# ── Page: Applications ───────────────────────────────────────────────────


def page_applications() -> None:
    st.title("Applications")
    service = _service()
    resume_id = _current_resume_id()
    if resume_id is None:
        st.info("Upload a resume on the Review page first.")
        return

    apps = service.get_applications_for_resume(resume_id)
    if not apps:
        st.info("No applications yet. Apply from the Jobs page.")
        return

    for a in apps:
        job = service.get_job_suggestion(a.job_suggestion_id)
        with st.expander(f"{job.job_title} @ {job.company} — {a.status}"):
            st.caption(f"Applied {a.applied_at.strftime('%Y-%m-%d %H:%M')} UTC")
            status = st.selectbox(
                "Status", APPLICATION_STATUSES,
                index=APPLICATION_STATUSES.index(a.status), key=f"status_{a.id}",
            )
            if status != a.status:
                service.update_application_status(a.id, status)
                st.rerun()
            if a.response_status:
                st.markdown(f"**Response:** {a.response_status} — {a.response_message or ''}")
            with st.form(f"response_{a.id}"):
                r_status = st.text_input("Response status")
                r_message = st.text_area("Response message")
                if st.form_submit_button("Save response") and r_status:
                    service.update_application_response(a.id, r_status, r_message)
                    st.rerun()
            if st.button("Withdraw & delete", key=f"delete_{a.id}"):
                service.delete_application(a.id)
                st.rerun()


def _inject_css() -> None:
    st.markdown(_GLASS_CSS, unsafe_allow_html=True)


def _wrap(page):
    def run() -> None:
        _inject_css()
        page()

    run.__name__ = page.__name__
    return run


pages = [
    st.Page(_wrap(page_review), title="Review", icon="📄", url_path="review", default=True),
    st.Page(_wrap(page_jobs), title="Jobs", icon="💼", url_path="jobs"),
    st.Page(_wrap(page_applications), title="Applications", icon="📋", url_path="applications"),
]

nav = st.navigation(pages)
nav.run()

import pytest

from resume_review.errors import AlreadyAppliedError, InvalidResumeError, ResourceNotFoundError
from resume_review.service import ResumeReviewService, upload_fingerprint


def _upload(service, text, name="resume.txt"):
    return service.upload_resume(name, text.encode("utf-8"))


def test_upload_stores_file_and_extracts_text(service, strong_resume_text):
    resume = _upload(service, strong_resume_text)
    assert resume.id == 1
    assert resume.status == "UPLOADED"
    assert resume.file_name == "resume.txt"
    assert resume.extracted_text == strong_resume_text
    stored = service.upload_dir / resume.file_path.rsplit("/", 1)[-1]
    assert stored.exists()
    assert stored.name.endswith("_resume.txt")


@pytest.mark.parametrize(
    "name, content",
    [("resume.txt", b""), ("resume.exe", b"MZ"), ("resume", b"plain")],
)
def test_upload_rejects_bad_files(service, name, content):
    with pytest.raises(InvalidResumeError):
        service.upload_resume(name, content)


def test_upload_rejects_oversized_file(tmp_path):
    small = ResumeReviewService(upload_dir=tmp_path, max_file_size=10)
    with pytest.raises(InvalidResumeError, match="maximum allowed size"):
        small.upload_resume("resume.txt", b"x" * 11)


def test_register_resume_from_disk(service, tmp_path):
    path = tmp_path / "cv.txt"
    path.write_text("Education: degree", encoding="utf-8")
    resume = service.register_resume(path)
    assert resume.file_name == "cv.txt"
    assert resume.file_size == path.stat().st_size
    with pytest.raises(InvalidResumeError):
        service.register_resume(tmp_path / "missing.txt")


def test_unknown_resume_raises_not_found(service):
    with pytest.raises(ResourceNotFoundError, match="Resume not found with ID: 42"):
        service.generate_review_score(42)
    with pytest.raises(ResourceNotFoundError):
        service.generate_job_suggestions(42)


def test_review_history_returns_latest(service, strong_resume_text):
    resume = _upload(service, strong_resume_text)
    with pytest.raises(ResourceNotFoundError):
        service.get_review_score(resume.id)
    first = service.generate_review_score(resume.id)
    second = service.generate_review_score(resume.id)
    assert first.id != second.id
    assert first.overall_score == second.overall_score
    assert service.get_review_score(resume.id) is second
    assert second.resume_id == resume.id


def test_suggestions_accumulate_and_sort_by_match(service):
    resume = _upload(service, "docker kubernetes aws sql")
    generated = service.generate_job_suggestions(resume.id)
    assert len(generated) == 5
    assert all(s.id is not None and s.resume_id == resume.id for s in generated)
    service.generate_job_suggestions(resume.id)

    listed = service.get_job_suggestions(resume.id)
    assert len(listed) == 10
    scores = [s.match_score for s in listed]
    assert scores == sorted(scores, reverse=True)
    assert listed[0].job_title == "DevOps Engineer"
    assert service.get_job_suggestion(generated[0].id) is generated[0]


def test_application_lifecycle(service, strong_resume_text):
    resume = _upload(service, strong_resume_text)
    suggestion = service.generate_job_suggestions(resume.id)[0]

    app = service.apply_for_job(suggestion.id, resume.id, "excited")
    assert app.status == "APPLIED"
    with pytest.raises(AlreadyAppliedError):
        service.apply_for_job(suggestion.id, resume.id)

    service.update_application_status(app.id, "OFFERED")
    service.update_application_response(app.id, "POSITIVE", "Offer letter sent")
    fetched = service.get_application(app.id)
    assert fetched.status == "OFFERED"
    assert fetched.response_status == "POSITIVE"
    assert service.get_applications_for_resume(resume.id) == [fetched]

    service.delete_application(app.id)
    assert service.get_applications_for_resume(resume.id) == []


def test_apply_requires_known_suggestion_and_resume(service, strong_resume_text):
    resume = _upload(service, strong_resume_text)
    with pytest.raises(ResourceNotFoundError, match="Job suggestion"):
        service.apply_for_job(99, resume.id)
    suggestion = service.generate_job_suggestions(resume.id)[0]
    with pytest.raises(ResourceNotFoundError, match="Resume"):
        service.apply_for_job(suggestion.id, 99)


def test_resume_status_updates(service):
    resume = _upload(service, "hello")
    before = resume.updated_at
    service.update_resume_status(resume.id, "REVIEWED")
    assert service.get_resume_status(resume.id) == "REVIEWED"
    assert resume.updated_at >= before


def test_delete_resume_removes_file_and_related_records(service, strong_resume_text):
    resume = _upload(service, strong_resume_text)
    service.generate_review_score(resume.id)
    suggestion = service.generate_job_suggestions(resume.id)[0]
    service.apply_for_job(suggestion.id, resume.id)

    service.delete_resume(resume.id)

    assert service.list_resumes() == []
    assert not list(service.upload_dir.iterdir())
    with pytest.raises(ResourceNotFoundError):
        service.get_job_suggestion(suggestion.id)
    assert service.tracker.for_resume(resume.id) == []


def test_upload_fingerprint_tracks_content_not_just_name():
    first = upload_fingerprint("cv.pdf", b"version one")
    assert first == upload_fingerprint("cv.pdf", b"version one")
    assert first != upload_fingerprint("cv.pdf", b"version two")
    assert first != upload_fingerprint("other.pdf", b"version one")

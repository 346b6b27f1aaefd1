from resume_review.feedback import (
    EXTRACTION_FAILED_MESSAGE,
    generate_feedback,
    generate_suggestions,
)

GENERIC = [
    "✓ Ensure proper spelling and grammar throughout.",
    "✓ Use action verbs to describe your achievements.",
    "✓ Quantify your accomplishments with metrics and numbers.",
]


def test_feedback_tiers_in_category_order():
    text = generate_feedback(80, 60, 59.9)
    assert text == (
        "• Excellent resume format and structure.\n"
        "• Decent content coverage. Add more details to key sections.\n"
        "• Add more relevant keywords to improve ATS compatibility.\n"
    )


def test_feedback_middle_and_low_tiers():
    lines = generate_feedback(50, 20, 79.9).splitlines()
    assert lines == [
        "• Resume format needs improvement. Consider using a cleaner layout.",
        "• Content needs expansion. Include all important sections.",
        "• Good keyword usage. Consider adding more industry-specific terms.",
    ]


def test_suggestions_for_empty_text_is_only_the_extraction_message():
    assert generate_suggestions("") == EXTRACTION_FAILED_MESSAGE
    assert generate_suggestions(None) == EXTRACTION_FAILED_MESSAGE


def test_suggestions_for_bare_text_lists_every_gap_in_order():
    lines = generate_suggestions("hello").splitlines()
    assert lines == [
        "✓ Add a detailed 'Experience' section with your work history.",
        "✓ Include an 'Education' section with degrees and certifications.",
        "✓ Create a 'Skills' section highlighting technical and soft skills.",
        "✓ Consider adding a 'Projects' section showcasing your work.",
        "✓ Make sure your email address is clearly visible.",
        "✓ Expand your resume content for more detailed information.",
        *GENERIC,
    ]


def test_email_check_ignores_case():
    text = "Contact: JANE.DOE@EXAMPLE.COM"
    assert "email address" not in generate_suggestions(text)


def test_complete_long_resume_gets_generic_tips_only():
    text = "Experience Education Skills Projects me@example.io " + "x" * 500
    assert generate_suggestions(text).splitlines() == GENERIC


def test_suggestions_end_with_newline():
    assert generate_suggestions("hello").endswith("\n")

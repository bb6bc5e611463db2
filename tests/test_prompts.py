import pytest

from interview_chat.core.prompts import (
    DIFFICULTY_CONTEXT,
    ROLE_PROMPTS,
    build_evaluation_prompt,
    build_interviewer_prompt,
)


@pytest.mark.parametrize("role_type", sorted(ROLE_PROMPTS))
def test_known_role_template_is_embedded_verbatim(role_type):
    prompt = build_interviewer_prompt(role_type, "intermediate")

    assert f"for a {ROLE_PROMPTS[role_type]} position" in prompt


def test_there_are_seven_roles_and_three_tiers():
    assert set(ROLE_PROMPTS) == {"devops", "cloud", "software", "data", "fullstack", "frontend", "backend"}
    assert set(DIFFICULTY_CONTEXT) == {"beginner", "intermediate", "advanced"}


def test_unknown_role_falls_back_to_software_engineer():
    prompt = build_interviewer_prompt("astronaut", "beginner")

    assert "mock interview for a Software Engineer position" in prompt
    for template in ROLE_PROMPTS.values():
        assert template not in prompt


@pytest.mark.parametrize("difficulty", sorted(DIFFICULTY_CONTEXT))
def test_known_difficulty_selects_its_context(difficulty):
    prompt = build_interviewer_prompt("backend", difficulty)

    assert DIFFICULTY_CONTEXT[difficulty] in prompt
    others = [text for key, text in DIFFICULTY_CONTEXT.items() if key != difficulty]
    assert not any(text in prompt for text in others)


@pytest.mark.parametrize("difficulty", ["expert", "", None])
def test_unknown_difficulty_falls_back_to_intermediate(difficulty):
    prompt = build_interviewer_prompt("backend", difficulty)

    assert DIFFICULTY_CONTEXT["intermediate"] in prompt


def test_job_description_is_included_only_when_present():
    with_jd = build_interviewer_prompt("data", "advanced", "Build Spark pipelines for payments")
    without_jd = build_interviewer_prompt("data", "advanced", "   ")

    assert "job description: Build Spark pipelines for payments" in with_jd
    assert "job description" not in without_jd
    assert "Interview Guidelines:" in with_jd


def test_templates_are_read_only():
    with pytest.raises(TypeError):
        ROLE_PROMPTS["devops"] = "changed"


def test_evaluation_prompt_demands_json_with_required_fields():
    prompt = build_evaluation_prompt("cloud")

    assert ROLE_PROMPTS["cloud"] in prompt
    for field in ("overallScore", "skillRatings", "summary", "improvementPlan"):
        assert f'"{field}"' in prompt
    assert "Respond ONLY with valid JSON" in prompt

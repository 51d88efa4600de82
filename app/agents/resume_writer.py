from app.agents.structured import StructuredGenerationClient


def build_improve_prompt(section_type: str, current: str, industry: str | None) -> str:
    who = f"a {industry} professional" if industry else "a professional"

    return f"""
As an expert resume writer, improve the following {section_type} description for {who}.
Make it more impactful, quantifiable, and aligned with industry standards.
Current content: "{current}"

Requirements:
1. Use action verbs
2. Include metrics and results where possible
3. Highlight relevant technical skills
4. Keep it concise but detailed
5. Focus on achievements over responsibilities
6. Use industry-specific keywords

Format the response as a single paragraph without any additional text or explanations.
""".strip()


def improve_resume_content(
    generator: StructuredGenerationClient,
    *,
    section_type: str,
    current: str,
    industry: str | None,
) -> str:
    # No fallback: GenerationFailure propagates to the caller
    return generator.generate_text(
        build_improve_prompt(section_type, current, industry),
        error_message="Failed to improve content",
    )

"""
Instruction template for the literature review analysis.
"""

TOPIC_PLACEHOLDER = "{RESEARCH_TOPIC}"

PROMPT_TEMPLATE = """You are an Academic Research Assistant specialised in Systematic Literature Reviews.
Your goal is to analyse the provided batch of research articles (PDFs) and evaluate their relevance to the specific Research Topic provided below.

Research Topic: "{RESEARCH_TOPIC}"

Follow these stages rigorously:

STAGE 1: DEEP INDIVIDUAL ANALYSIS
For each article, analyse:
- Identification (Title, Authors, Year)
- Relevance Rating (integer 0-100) based on alignment with the topic.
- Rating Justification (brief explanation).
- Methodological Summary.
- Key Contributions.
- Thesis Integration advice.

STAGE 2: SUMMARY OVERVIEW TABLE
Provide data for a concise table: Article Name, Rating, Core Conclusion, Utility (Low/Medium/High).

STAGE 3: SYNTHESIS MATRIX
Compare articles across:
- Common themes/frameworks.
- Divergent results/conflicting viewpoints.
- Research gaps.

GUIDELINES:
- Objective, academic tone.
- If rating < 30, provide a brief summary.
- If rating > 85, highlight specific strong points.

Return the result in the specified JSON structure."""


class PromptTemplateError(ValueError):
    """Raised when a template cannot be rendered into final instructions."""


def render_prompt(topic: str, template: str = PROMPT_TEMPLATE) -> str:
    """
    Substitute the research topic into the instruction template.

    Args:
        topic: Research topic supplied by the user
        template: Template containing exactly the topic placeholder

    Returns:
        Rendered instruction text

    Raises:
        PromptTemplateError: If the template has no placeholder, or a
            placeholder token is still present after rendering
    """
    if TOPIC_PLACEHOLDER not in template:
        raise PromptTemplateError(
            f"Template does not contain the {TOPIC_PLACEHOLDER} placeholder"
        )

    rendered = template.replace(TOPIC_PLACEHOLDER, topic)

    if TOPIC_PLACEHOLDER in rendered:
        raise PromptTemplateError(
            f"Rendered prompt still contains {TOPIC_PLACEHOLDER}"
        )
    return rendered

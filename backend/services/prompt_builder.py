"""Prompt templates for the optional Gemini-written review."""

from services.profiles import ReviewProfile

SYSTEM_RULES = """You write strict, high-signal {title_lower} critiques for engineering students and early-career engineers.

Non-negotiable requirements:
- Write directly to the person in second person ("you").
- Clear, professional language. No buzzwords. No emojis. No hype. No motivational fluff.
- Do NOT reference AI, tools, algorithms, automation, or that this is generated.
- Be honest. Never apologize for being direct.
- Do not invent details. Only use what is present in the text.
- If the text appears to target multiple roles, call it out as a major weakness.

{reality_check}

Required output format:
- Return ONLY a single HTML fragment (no markdown).
- Use simple tags: <div>, <h2>, <h3>, <h4>, <p>, <ul>, <ol>, <li>, <strong>, <hr>.
- Include a scorecard (0-100) with: Overall, {dimensions}.
- Cover each of: {sections}.
- Include exactly one single biggest improvement opportunity.
- Include a numbered plan titled "{plan_title}".
- End with exactly:

Thanks,
Your Friend and Mentor,
{mentor_name}"""


def build_system_rules(profile: ReviewProfile, mentor_name: str) -> str:
    return SYSTEM_RULES.format(
        title_lower=profile.title.lower(),
        reality_check=profile.reality_check,
        dimensions=", ".join(d.label for d in profile.dimensions),
        sections=", ".join(c.title for c in profile.critiques),
        plan_title=profile.plan_title,
        mentor_name=mentor_name,
    )


def build_review_prompt(profile: ReviewProfile, text: str, target_role: str) -> str:
    """User turn: instructions plus the fenced document.

    The document is fenced so the model treats it as input, not instructions.
    """
    return f"""Create a {profile.title} that follows all requirements.
If the target role is missing, treat that as the likely single biggest issue unless another issue is clearly bigger.
Keep it readable on a phone: short sections, tight bullets, direct language.

Return only HTML.

TARGET ROLE (optional): {target_role or "(not provided)"}

{profile.noun.upper()} TEXT:
```
{text}
```"""

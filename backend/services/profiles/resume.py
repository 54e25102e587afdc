"""Resume review profile: keyword tables, score rules and report text."""

from services.profiles.base import (
    CritiqueTemplate,
    Dimension,
    Finding,
    IssueTexts,
    ReviewProfile,
    RewriteTemplate,
    ScoreRule,
)
from services.profiles.keywords import (
    CERTIFICATION_KEYWORDS,
    EDUCATION_KEYWORDS,
    PROJECT_KEYWORDS,
    RESUME_METRICS_RE,
    ROLE_KEYWORDS,
    TOOL_KEYWORDS,
    WEAK_PHRASES,
)

SECTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "summary": ("summary", "objective", "profile", "about me"),
    "education": EDUCATION_KEYWORDS,
    "experience": (
        "experience", "internship", "intern", "co-op", "employment",
        "work history",
    ),
    "projects": PROJECT_KEYWORDS,
    "skills": ("skills", "technical skills", "technologies", "proficiencies"),
    "certifications": CERTIFICATION_KEYWORDS,
}

# Weights sum to 1.0
DIMENSIONS: tuple[Dimension, ...] = (
    Dimension("roleClarity", "Role clarity", base=30, weight=0.22, rules=(
        ScoreRule("target_role_given", 20),
        ScoreRule("roles_detected", 15),
        ScoreRule("target_role_aligned", 15),
        ScoreRule("has_summary", 10),
        ScoreRule("multi_role_ambiguity", -20),
    )),
    Dimension("projects", "Projects strength", base=20, weight=0.18, rules=(
        ScoreRule("has_projects", 40),
        ScoreRule("tools_count", 15, min_value=2),
        ScoreRule("metrics_count", 10),
    )),
    Dimension("impactBullets", "Impact bullets", base=25, weight=0.22, rules=(
        ScoreRule("metrics_count", 25),
        ScoreRule("metrics_count", 15, min_value=3),
        ScoreRule("metrics_count", 10, min_value=5),
        ScoreRule("action_verb_count", 15, min_value=3),
        ScoreRule("weak_words_count", -10),
        ScoreRule("weak_words_count", -10, min_value=3),
    )),
    Dimension("skillsCredibility", "Skills credibility", base=30, weight=0.18, rules=(
        ScoreRule("has_skills", 25),
        ScoreRule("tools_count", 15, min_value=2),
        ScoreRule("tools_count", 10, min_value=5),
        ScoreRule("has_projects", 10),
        ScoreRule("has_experience", 10),
        ScoreRule("has_certifications", 5),
    )),
    Dimension("atsReadability", "ATS readability", base=40, weight=0.12, rules=(
        ScoreRule("has_email", 15),
        ScoreRule("has_experience", 10),
        ScoreRule("has_education", 10),
        ScoreRule("has_skills", 10),
        ScoreRule("bullet_count", 10, min_value=3),
        ScoreRule("long_line_count", -15, min_value=3),
    )),
    Dimension("formatting", "Formatting", base=50, weight=0.08, rules=(
        ScoreRule("bullet_count", 20, min_value=3),
        ScoreRule("has_phone", 10),
        ScoreRule("has_profile_link", 10),
        ScoreRule("long_line_count", -15, min_value=3),
        ScoreRule("word_count", -15, min_value=900),
        ScoreRule("word_count", -10, min_value=0, max_value=120),
    )),
)

CRITIQUES: tuple[CritiqueTemplate, ...] = (
    CritiqueTemplate(
        title="Header",
        signals=("has_email", "has_phone", "has_profile_link"),
        missing="Your header is missing basic contact details.",
        findings=(
            Finding("No email address found. Recruiters can't reply to a resume they can't answer.",
                    signal="has_email", min_value=0, max_value=0),
            Finding("No phone number found.", signal="has_phone", min_value=0, max_value=0),
            Finding("Add your LinkedIn URL, and GitHub or a portfolio link if you have one.",
                    signal="has_profile_link", min_value=0, max_value=0),
            Finding("Keep name, email, phone and links on one or two lines at the top."),
        ),
    ),
    CritiqueTemplate(
        title="Summary / Positioning",
        signals=("has_summary",),
        dimensions=("roleClarity",),
        missing="There is no summary telling the reader what you are aiming for.",
        weak="Your positioning is not obvious in the first ten seconds.",
        findings=(
            Finding("You did not name a target role. Pick one and write the top third for it.",
                    signal="target_role_given", min_value=0, max_value=0),
            Finding("The resume pulls toward {roles}. Pick one direction and demote the rest.",
                    signal="multi_role_ambiguity"),
            Finding("Right now the strongest signal reads as {top_role}.", signal="roles_detected"),
            Finding("Open with two lines: the role you want, and the proof that you can do it."),
        ),
    ),
    CritiqueTemplate(
        title="Education",
        signals=("has_education",),
        missing="No education section found.",
        findings=(
            Finding("List degree, school, and expected graduation date. Add GPA if it is 3.0 or higher."),
            Finding("Add relevant coursework only when it supports {role}."),
        ),
    ),
    CritiqueTemplate(
        title="Projects",
        signals=("has_projects",),
        dimensions=("projects",),
        missing="There is no Projects section. Early in your career it is often the strongest proof you have.",
        weak="Your projects are there, but they don't prove much yet.",
        findings=(
            Finding("Give each project a problem, your contribution, the tools, and a result."),
            Finding("Name the tools you actually used: CAD, test equipment, languages.",
                    signal="tools_count", min_value=0, max_value=1),
            Finding("Add at least one number per project: tolerance, time saved, cost, test count.",
                    signal="metrics_count", min_value=0, max_value=0),
        ),
    ),
    CritiqueTemplate(
        title="Experience",
        signals=("has_experience",),
        dimensions=("impactBullets",),
        missing="No experience section found. Internships, co-ops, lab work and part-time jobs all count.",
        weak="Your bullets read more like duties than results.",
        findings=(
            Finding("None of your bullets carry a number. Recruiters skim for them.",
                    signal="metrics_count", min_value=0, max_value=0),
            Finding("You have {metrics_count} quantified result(s). Put the strongest one first.",
                    signal="metrics_count"),
            Finding("Cut vague phrasing: {weak_phrases}.", signal="weak_words_count"),
            Finding("Start each bullet with a strong verb: designed, tested, reduced, built.",
                    signal="action_verb_count", min_value=0, max_value=2),
        ),
    ),
    CritiqueTemplate(
        title="Skills",
        signals=("has_skills",),
        dimensions=("skillsCredibility",),
        missing="No skills section found.",
        weak="Your skills list is thin or not backed by proof.",
        findings=(
            Finding("Tools found: {tools}. Each one should also appear in a project or bullet.",
                    signal="tools_count"),
            Finding("List specific tools and software instead of traits.",
                    signal="tools_count", min_value=0, max_value=0),
            Finding("Traits like {weak_phrases} do not belong in a skills list.",
                    signal="weak_words_count"),
        ),
    ),
    CritiqueTemplate(
        title="Formatting / ATS",
        dimensions=("atsReadability", "formatting"),
        weak="Your layout will cost you with both parsers and people.",
        findings=(
            Finding("Several lines run as long paragraphs. Break them into bullets.",
                    signal="long_line_count", min_value=3),
            Finding("Use simple bullets so parsers and humans can scan the page.",
                    signal="bullet_count", min_value=0, max_value=2),
            Finding("At {word_count} words this is likely over one page. Trim it.",
                    signal="word_count", min_value=900),
            Finding("At {word_count} words there is not enough here to judge. Add detail.",
                    signal="word_count", min_value=0, max_value=120),
            Finding("Use standard headings: Education, Experience, Projects, Skills."),
        ),
    ),
)

REWRITES: tuple[RewriteTemplate, ...] = (
    RewriteTemplate(
        title="Impact bullet",
        template="[Action verb] [what you built or changed] for [team or product], "
                 "[result] by [number]% in [timeframe].",
        note="Shape to copy: Reduced fixture setup time 30% by redesigning the clamps in SolidWorks.",
    ),
    RewriteTemplate(
        title="Project bullet",
        template="Built [project] to solve [problem] using [tools]; [result with a number].",
        note="One project like this, written for {role}, beats five vague ones.",
    ),
    RewriteTemplate(
        title="Skills credibility",
        template="{role} tools: [tool 1], [tool 2], [tool 3] (used in [project name]).",
        note="Only list what you could defend in an interview.",
    ),
)

PLAN: tuple[str, ...] = (
    "Pick one target role ({role}) and rewrite your summary and top third for it.",
    "Rewrite every experience bullet as action + result + number.",
    "Add or rebuild your Projects section: two or three projects with problem, tools and result.",
    "Trim the skills list to tools you can prove, and make each one show up in a bullet.",
    "Fix formatting: one page, one column, standard headings, simple bullets.",
    "Tailor keywords to three real job postings for {role}.",
    "Have an engineer read it for ten seconds and tell you the role you are after. Fix whatever they miss.",
)

FIXES: dict[str, str] = {
    "roleClarity": "Name one target role and make the top third say it.",
    "projects": "Add a Projects section with at least two quantified projects.",
    "impactBullets": "Rewrite your top bullets with numbers and outcomes.",
    "skillsCredibility": "Back every listed skill with a project or bullet.",
    "atsReadability": "Use standard section headings and plain bullets.",
    "formatting": "Fit it on one clean page with a consistent layout.",
}

CLOSING = (
    "Thank you for sending this to me to review. These are just my opinions, "
    "not absolute rules. Take them with a grain of salt and only implement "
    "what you feel will work for you.\n\n"
    "If you got any value from this review, please leave me a review on any "
    "of my TikTok videos that shows up on your feed."
)

RESUME_PROFILE = ReviewProfile(
    kind="resume",
    title="Resume Review",
    noun="Resume",
    section_keywords=SECTION_KEYWORDS,
    role_keywords=ROLE_KEYWORDS,
    tool_keywords=TOOL_KEYWORDS,
    weak_phrases=WEAK_PHRASES,
    metrics_pattern=RESUME_METRICS_RE,
    detect_multi_role=True,
    dimensions=DIMENSIONS,
    issues=IssueTexts(
        no_direction="Your positioning and target role are unclear. "
                     "A reader can't tell what job this resume is for.",
        no_metrics="Your bullets read like duties, not impact. Nothing is quantified.",
        no_projects="You are missing a Projects section, the easiest proof you can add.",
        fallback="Tighten the top third so the match is obvious in under ten seconds.",
    ),
    reality_check="Your resume has to read as a match in under ten seconds. "
                  "Role clarity and impact bullets decide callbacks.",
    verdicts={
        "ready": "Ready to apply. Tighten the details and send it out.",
        "close": "Close. Fix the biggest issue before you apply widely.",
        "not ready": "Not ready yet. Fix the core problems below before applying.",
    },
    strategy_notes={
        "ready": "Apply to roles that match your target, and tailor the top third for each posting.",
        "close": "Make the fixes below first, then apply in small, targeted batches.",
        "not ready": "Hold off on mass applying. Every rejection now costs a first impression "
                     "you can't get back.",
    },
    critiques=CRITIQUES,
    rewrites=REWRITES,
    plan_title="7-day improvement plan",
    plan_label="Day",
    plan=PLAN,
    fixes=FIXES,
    polish_fix="Tailor the top third to each posting before you apply.",
    closing=CLOSING,
)

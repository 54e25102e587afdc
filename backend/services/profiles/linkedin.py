"""LinkedIn profile review: positioning first, then proof."""

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
    LINKEDIN_METRICS_RE,
    PROJECT_KEYWORDS,
    ROLE_KEYWORDS,
    TOOL_KEYWORDS,
    WEAK_PHRASES,
)

SECTION_KEYWORDS: dict[str, tuple[str, ...]] = {
    "headline": (
        "headline", "engineering student", "engineer at", "student at",
        "intern at", "|",
    ),
    "about": ("about", "summary"),
    "experience": ("experience", "internship", "intern", "co-op"),
    "projects": PROJECT_KEYWORDS,
    "skills": ("skills", "top skills", "endorsements", "endorsed"),
    "education": EDUCATION_KEYWORDS,
    "certifications": ("licenses & certifications",) + CERTIFICATION_KEYWORDS,
    "activity": ("activity", "posts", "followers", "connections"),
}

# Five equal weights: the overall is the plain mean
DIMENSIONS: tuple[Dimension, ...] = (
    Dimension("roleClarity", "Positioning", base=30, weight=0.2, rules=(
        ScoreRule("target_role_given", 20),
        ScoreRule("roles_detected", 15),
        ScoreRule("target_role_aligned", 15),
        ScoreRule("has_headline", 10),
    )),
    Dimension("headline", "Headline", base=25, weight=0.2, rules=(
        ScoreRule("has_headline", 35),
        ScoreRule("roles_detected", 15),
        ScoreRule("target_role_given", 10),
        ScoreRule("weak_words_count", -15),
    )),
    Dimension("impactBullets", "Experience signal", base=25, weight=0.2, rules=(
        ScoreRule("has_experience", 20),
        ScoreRule("metrics_count", 20),
        ScoreRule("metrics_count", 10, min_value=3),
        ScoreRule("action_verb_count", 10, min_value=2),
        ScoreRule("weak_words_count", -10),
        ScoreRule("weak_words_count", -10, min_value=3),
    )),
    Dimension("projects", "Projects", base=20, weight=0.2, rules=(
        ScoreRule("has_projects", 40),
        ScoreRule("tools_count", 15, min_value=2),
        ScoreRule("metrics_count", 10),
    )),
    Dimension("skillsCredibility", "Skills credibility", base=30, weight=0.2, rules=(
        ScoreRule("has_skills", 25),
        ScoreRule("tools_count", 15, min_value=2),
        ScoreRule("tools_count", 10, min_value=5),
        ScoreRule("has_projects", 10),
        ScoreRule("has_certifications", 10),
    )),
)

CRITIQUES: tuple[CritiqueTemplate, ...] = (
    CritiqueTemplate(
        title="Positioning",
        dimensions=("roleClarity",),
        weak="A stranger can't tell what you want within five seconds.",
        findings=(
            Finding("You did not name a target role. Everything else depends on that choice.",
                    signal="target_role_given", min_value=0, max_value=0),
            Finding("The profile currently reads as {top_role}. Make sure that is on purpose.",
                    signal="roles_detected"),
            Finding("Pick one direction. A profile aimed at everyone gets messaged by no one."),
        ),
    ),
    CritiqueTemplate(
        title="Headline",
        signals=("has_headline",),
        dimensions=("headline",),
        missing="No clear headline found. It is the highest-value line on your profile.",
        weak="Your headline communicates potential, not direction.",
        findings=(
            Finding("Drop vague traits ({weak_phrases}). Nobody searches for them.",
                    signal="weak_words_count"),
            Finding("Use: target role | specialty | proof. Example: "
                    "Mechanical Engineering Student | CAD & Test Fixtures | FSAE."),
        ),
    ),
    CritiqueTemplate(
        title="About",
        signals=("has_about",),
        missing="No About section found.",
        findings=(
            Finding("Write four to six short lines: direction, what you have built, what you want next."),
        ),
    ),
    CritiqueTemplate(
        title="Experience",
        signals=("has_experience",),
        dimensions=("impactBullets",),
        missing="No experience found. Internships, research, lab and part-time work all count.",
        weak="Your experience lists duties. Signal comes from decisions, constraints and results.",
        findings=(
            Finding("No numbers anywhere. Add at least one result per role.",
                    signal="metrics_count", min_value=0, max_value=0),
            Finding("Cut duty-only phrasing: {weak_phrases}.", signal="weak_words_count"),
            Finding("Prestige doesn't matter here. What you decided and changed does."),
        ),
    ),
    CritiqueTemplate(
        title="Projects",
        signals=("has_projects",),
        dimensions=("projects",),
        missing="No projects found. Add them to the Projects or Featured section.",
        weak="Your projects need more substance.",
        findings=(
            Finding("For each: problem, constraints, tools, your contribution, key decisions."),
            Finding("A few strong projects beat many weak ones."),
        ),
    ),
    CritiqueTemplate(
        title="Skills",
        signals=("has_skills",),
        dimensions=("skillsCredibility",),
        missing="No skills listed.",
        weak="Your skills are not backed by visible proof.",
        findings=(
            Finding("Tools found: {tools}. Pin the three that match {role}.", signal="tools_count"),
            Finding("No buzzword stacking. Every skill should tie to a project or role."),
        ),
    ),
    CritiqueTemplate(
        title="Education",
        signals=("has_education",),
        missing="No education found.",
        findings=(
            Finding("List degree, school and graduation date accurately. Don't inflate it."),
        ),
    ),
    CritiqueTemplate(
        title="Activity",
        signals=("has_activity",),
        missing="No activity found.",
        findings=(
            Finding("You don't need to post daily, but a silent profile reads as not job searching."),
            Finding("Comment on or share one engineering post a week in the {role} space."),
        ),
    ),
)

REWRITES: tuple[RewriteTemplate, ...] = (
    RewriteTemplate(
        title="Headline",
        template="{role} | [specialty] | [proof: project, team or result]",
    ),
    RewriteTemplate(
        title="About opening",
        template="I am a [year/level] [discipline] student focused on [direction]. "
                 "I have built [project] using [tools], which [result].",
        note="Keep it to the point. No traits, only direction and proof.",
    ),
    RewriteTemplate(
        title="Experience line",
        template="[Action verb] [what] under [constraint], resulting in [number] [outcome].",
    ),
)

PLAN: tuple[str, ...] = (
    "Rewrite your headline for {role}: target role, specialty, proof.",
    "Rewrite About in four to six short lines: direction, what you've built, what you want next.",
    "Rewrite each experience entry around decisions, constraints and results, not duties.",
    "Add two or three strong projects to the Projects or Featured section.",
    "Align skills with proof and remove anything you can't back up.",
    "Connect with engineers, recruiters and alumni working in {role}, and send short, specific messages.",
)

FIXES: dict[str, str] = {
    "roleClarity": "Decide on one target role and make the whole profile point at it.",
    "headline": "Rewrite the headline before you send a single message.",
    "impactBullets": "Add results to your experience entries.",
    "projects": "Add at least two projects with tools and outcomes.",
    "skillsCredibility": "Trim skills to what your projects and roles prove.",
}

LINKEDIN_PROFILE = ReviewProfile(
    kind="linkedin",
    title="LinkedIn Profile Review",
    noun="LinkedIn",
    section_keywords=SECTION_KEYWORDS,
    role_keywords=ROLE_KEYWORDS,
    tool_keywords=TOOL_KEYWORDS,
    weak_phrases=WEAK_PHRASES + ("aspiring", "seeking opportunities", "open to anything"),
    metrics_pattern=LINKEDIN_METRICS_RE,
    detect_multi_role=False,
    dimensions=DIMENSIONS,
    issues=IssueTexts(
        no_direction="Your positioning is unclear. Nobody can tell what role you want.",
        no_metrics="Your experience reads like duties, not impact. Nothing is quantified.",
        no_projects="You are missing projects, the fastest proof a recruiter can check.",
        fallback="Tighten your headline so the match is obvious within five seconds.",
    ),
    reality_check="Your profile exists to answer one question: is this person worth "
                  "messaging, referring or interviewing? Positioning has to land in five seconds.",
    verdicts={
        "ready": "Ready. The profile supports active applying and networking.",
        "close": "Close. A few fixes and it will carry your outreach.",
        "not ready": "Not ready. Fix positioning and proof before you network.",
    },
    strategy_notes={
        "ready": "This profile is internship and entry-level ready. Use it alongside a "
                 "tailored resume and direct messages to engineers at target companies.",
        "close": "This profile is close to internship ready. Make the fixes, then start "
                 "targeted outreach instead of relying on easy-apply.",
        "not ready": "This profile is not yet internship or entry-level ready. Networking "
                     "now spends first impressions you will want later.",
    },
    critiques=CRITIQUES,
    rewrites=REWRITES,
    plan_title="Next steps",
    plan_label="Step",
    plan=PLAN,
    fixes=FIXES,
    polish_fix="Target connections by role, company and location instead of mass connecting.",
)

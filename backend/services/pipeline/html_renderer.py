"""HTML adapter: render a Report as a fragment for direct injection.

Autoescaping is on, so every value taken from the Report (including user
text such as the target role or detected phrases) is escaped.
"""

from jinja2 import Environment

from models.schemas.report import Report
from services.errors import PreconditionViolation

_env = Environment(autoescape=True, trim_blocks=True, lstrip_blocks=True)

REVIEW_TEMPLATE = _env.from_string("""\
<div class="review review-{{ r.kind }}">
<h2>{{ r.title }}</h2>
<div class="verdict">
  <p><strong>Readiness:</strong> {{ r.verdict }}</p>
  <p><strong>Biggest issue:</strong> {{ r.biggest_issue }}</p>
  {% if r.reality_check %}
  <p>{{ r.reality_check }}</p>
  {% endif %}
</div>
<h3>Scorecard</h3>
<ul class="scorecard">
  <li><strong>Overall:</strong> {{ r.score.overall }}/100</li>
  {% for key, value in r.score.score_breakdown.items() %}
  <li>{{ r.score_labels[key] }}: {{ value }}/100</li>
  {% endfor %}
</ul>
{% if r.detected_roles %}
<p><strong>Detected direction:</strong> {% for role in r.detected_roles %}{{ role.name }} ({{ role.hits }}){% if not loop.last %}, {% endif %}{% endfor %}</p>
{% endif %}
{% if r.sections %}
<h3>Section-by-section critique</h3>
{% for section in r.sections %}
<h4>{{ section.title }}</h4>
<p>{{ section.summary }}</p>
{% if section.findings %}
<ul>
  {% for finding in section.findings %}
  <li>{{ finding }}</li>
  {% endfor %}
</ul>
{% endif %}
{% endfor %}
{% endif %}
<h3>Rewrite examples</h3>
{% for rewrite in r.rewrites %}
<h4>{{ rewrite.title }}</h4>
<p>{{ rewrite.template }}</p>
{% if rewrite.note %}
<p><em>{{ rewrite.note }}</em></p>
{% endif %}
{% endfor %}
<h3>{{ r.plan_title }}</h3>
<ol>
  {% for step in r.plan %}
  <li><strong>{{ step.label }}:</strong> {{ step.action }}</li>
  {% endfor %}
</ol>
<h3>Final recommendation</h3>
<p>{{ r.verdict }}</p>
<p><strong>Single biggest improvement:</strong> {{ r.biggest_issue }}</p>
<h4>Fix before applying</h4>
<ul>
  {% for fix in r.fix_before_applying %}
  <li>{{ fix }}</li>
  {% endfor %}
</ul>
{% if r.strategy_note %}
<p>{{ r.strategy_note }}</p>
{% endif %}
<hr>
{% for paragraph in r.closing.split("\\n\\n") if paragraph %}
<p>{{ paragraph }}</p>
{% endfor %}
<p>{% for line in r.sign_off %}{{ line }}{% if not loop.last %}<br>{% endif %}{% endfor %}</p>
</div>
""")

PLAIN_TEMPLATE = _env.from_string(
    '<div class="review"><h2>{{ title }}</h2><p>{{ text }}</p></div>'
)


def render_html(report: Report) -> str:
    missing = set(report.score.score_breakdown) - set(report.score_labels)
    if missing:
        raise PreconditionViolation(f"No labels for score keys: {sorted(missing)}")
    return REVIEW_TEMPLATE.render(r=report)


def render_plain(title: str, text: str) -> str:
    """Wrap plain text (e.g. a non-HTML model answer) in an escaped fragment."""
    return PLAIN_TEMPLATE.render(title=title, text=text)


def looks_like_html(text: str) -> bool:
    return any(tag in text for tag in ("<div", "<h2", "<p"))

"""Shared test configuration and sample documents."""

import os

# Must run before config.Settings is instantiated by the app imports
os.environ["RATE_LIMIT_ENABLED"] = "false"
os.environ["REVIEW_ENGINE"] = "heuristic"
os.environ["GEMINI_API_KEY"] = ""

import pytest  # noqa: E402

# No section, role or tool keywords; only an email and vague traits
WEAK_RESUME = """Alex Morgan
alex.morgan@example.com

I like building things and solving hard problems with other people. I have spent time at a few places doing a range of tasks, and I am motivated and hardworking. I was responsible for many duties and I always finish what I start. I enjoy learning new things quickly and I am a team player who communicates well with everyone around me.
"""

MECHANICAL_RESUME = """Jordan Lee
jordan.lee@example.com | (555) 201-3344 | linkedin.com/in/jordanlee

Summary
Mechanical engineering graduate focused on design for manufacturing and test.

Education: B.S. Mechanical Engineering, State University, 2024

Experience: Manufacturing Engineering Intern, Acme Corp
- Reduced cycle time by 15% on the main assembly cell
- Designed 12 welding fixtures in SolidWorks

Projects: built a test fixture
- Built a load test fixture that cut setup time by 30%

Skills: SolidWorks, LabVIEW, MATLAB, GD&T
"""

MECHANICAL_LINKEDIN = """Taylor Kim
Mechanical Engineering Student at State University | CAD & Test Fixtures | FSAE

About
I design and test mechanical systems for our Formula SAE team and want to work in product design.

Experience
Design Intern, Acme Robotics
- Designed 14 sheet metal brackets in SolidWorks, cutting part cost by 20%
- Built a test fixture that shortened validation runs from 3 days to 1

Projects
FSAE suspension upright: FEA in ANSYS, reduced mass by 18%

Skills
SolidWorks, ANSYS, MATLAB, GD&T

Education
B.S. Mechanical Engineering, State University
"""


@pytest.fixture
def weak_resume():
    return WEAK_RESUME


@pytest.fixture
def mechanical_resume():
    return MECHANICAL_RESUME


@pytest.fixture
def mechanical_linkedin():
    return MECHANICAL_LINKEDIN

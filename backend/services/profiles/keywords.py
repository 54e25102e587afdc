"""Keyword tables shared by the resume and LinkedIn profiles."""

import re

# Declaration order is the tie-break order for equal hit counts
ROLE_KEYWORDS: tuple[tuple[str, tuple[str, ...]], ...] = (
    ("Electrical", (
        "electrical", "circuit", "circuits", "pcb", "altium", "schematic",
        "power electronics", "oscilloscope", "embedded", "fpga", "analog",
        "kicad", "ltspice",
    )),
    ("Mechanical", (
        "mechanical", "solidworks", "cad", "fea", "ansys", "gd&t", "thermal",
        "machining", "creo", "catia", "finite element", "fusion 360",
    )),
    ("Systems", (
        "systems engineering", "systems engineer", "requirements",
        "interface control", "trade study", "conops", "mbse", "sysml",
        "system integration",
    )),
    ("Test", (
        "test engineer", "test fixture", "test plan", "test procedure",
        "labview", "validation", "data acquisition", "daq",
        "hardware-in-the-loop", "hil",
    )),
    ("Software", (
        "software", "python", "java", "c++", "javascript", "git", "api",
        "backend", "frontend", "algorithms", "sql",
    )),
    ("Manufacturing", (
        "manufacturing", "lean", "six sigma", "cycle time", "production",
        "process improvement", "kaizen", "assembly line", "yield", "scrap",
    )),
    ("Controls", (
        "controls", "plc", "pid", "simulink", "control systems",
        "ladder logic", "scada", "automation",
    )),
    ("Civil", (
        "civil", "structural", "autocad", "revit", "surveying",
        "geotechnical", "concrete", "transportation",
    )),
)

TOOL_KEYWORDS: tuple[str, ...] = (
    "solidworks", "labview", "matlab", "simulink", "python", "c++", "java",
    "javascript", "sql", "git", "linux", "autocad", "ansys", "abaqus",
    "comsol", "altium", "kicad", "ltspice", "creo", "catia", "fusion 360",
    "revit", "minitab", "excel", "arduino", "raspberry pi", "plc", "verilog",
    "vhdl", "gd&t", "jira",
)

# Vague traits and duty-only phrasing
WEAK_PHRASES: tuple[str, ...] = (
    "responsible for", "duties included", "worked on", "helped with",
    "assisted with", "involved in", "tasked with", "motivated", "passionate",
    "hardworking", "hard-working", "hard working", "team player",
    "detail-oriented", "fast learner", "quick learner", "go-getter",
    "results-driven",
)

EDUCATION_KEYWORDS: tuple[str, ...] = (
    "education", "university", "college", "bachelor", "bachelors",
    "bachelor's", "master", "masters", "master's", "b.s.", "b.sc", "m.s.",
    "gpa", "degree", "coursework",
)

PROJECT_KEYWORDS: tuple[str, ...] = (
    "projects", "project", "capstone", "senior design",
)

CERTIFICATION_KEYWORDS: tuple[str, ...] = (
    "certification", "certifications", "certified", "license", "licenses",
    "fe exam", "eit", "six sigma green belt",
)

# Numbers that look like quantified results. Years, phone fragments and
# dates are excluded from the bare-number branches.
_NOT_YEAR = r"(?!(?:19|20)\d{2}(?!\d))"
_NUM_BEFORE = r"(?<![\d\-().+/,$:])\b"
_NUM_AFTER = r"(?![\d\-/,:%])"

RESUME_METRICS_RE = re.compile(
    r"\d+(?:\.\d+)?\s?%"
    r"|\$\s?\d[\d,]*(?:\.\d+)?\s?[kmb]?\b"
    r"|\b\d+(?:\.\d+)?x\b"
    r"|(?<![\d,])\d{1,3}(?:,\d{3})+(?![\d,])"
    rf"|{_NUM_BEFORE}{_NOT_YEAR}\d{{3,}}{_NUM_AFTER}",
    re.IGNORECASE,
)

LINKEDIN_METRICS_RE = re.compile(
    r"\d+(?:\.\d+)?\s?%"
    rf"|{_NUM_BEFORE}{_NOT_YEAR}\d{{2,}}{_NUM_AFTER}",
    re.IGNORECASE,
)

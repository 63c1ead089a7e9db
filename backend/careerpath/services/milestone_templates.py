"""Milestone templates for roadmap generation.

A roadmap is seeded from one of a few fixed six-step templates, chosen by
keyword match against the goal's target role. Templates are checked in the
order of ``ROLE_TEMPLATES`` and the first match wins, so a role such as
"Software Engineer / Product Manager" gets the software engineering plan.
Roles that match nothing get a generic plan with the role name filled in.
"""

from collections.abc import Callable
from dataclasses import dataclass

from careerpath.schemas.roadmap import Milestone, MilestoneCategory

SKILL = MilestoneCategory.SKILL
COURSE = MilestoneCategory.COURSE
CERTIFICATION = MilestoneCategory.CERTIFICATION
EXPERIENCE = MilestoneCategory.EXPERIENCE

# (title, description, category)
Step = tuple[str, str, MilestoneCategory]


@dataclass(frozen=True)
class RoleTemplate:
    name: str
    matches: Callable[[str], bool]
    steps: Callable[[str], list[Step]]


def _contains(*keywords: str) -> Callable[[str], bool]:
    return lambda role: any(keyword in role for keyword in keywords)


def _data_scientist_steps(target_role: str) -> list[Step]:
    return [
        (
            "Learn Python Fundamentals",
            "Master Python basics including data structures, functions, and file operations",
            SKILL,
        ),
        (
            "Data Analysis with Pandas",
            "Learn to manipulate and analyze data using Pandas library",
            SKILL,
        ),
        (
            "Introduction to Machine Learning with Scikit-Learn",
            "Understand ML algorithms and implement them using Scikit-Learn",
            COURSE,
        ),
        (
            "Complete a Kaggle Competition",
            "Apply your skills in a real-world data science competition",
            EXPERIENCE,
        ),
        (
            "Deep Learning Specialization",
            "Master neural networks and deep learning techniques",
            CERTIFICATION,
        ),
        (
            "Build a Portfolio Project",
            "Create an end-to-end data science project to showcase your skills",
            EXPERIENCE,
        ),
    ]


def _software_engineer_steps(target_role: str) -> list[Step]:
    return [
        (
            "Master Core Programming Language",
            "Develop proficiency in JavaScript/TypeScript, Python, or Java",
            SKILL,
        ),
        (
            "Learn Data Structures & Algorithms",
            "Study fundamental CS concepts for efficient problem-solving",
            SKILL,
        ),
        (
            "Web Development Framework",
            "Master React, Angular, or Vue for frontend development",
            COURSE,
        ),
        (
            "Contribute to Open Source",
            "Make meaningful contributions to GitHub projects",
            EXPERIENCE,
        ),
        (
            "Cloud Certification",
            "Earn AWS, Azure, or GCP certification",
            CERTIFICATION,
        ),
        (
            "Build a Full-Stack Application",
            "Create an end-to-end application demonstrating your skills",
            EXPERIENCE,
        ),
    ]


def _product_manager_steps(target_role: str) -> list[Step]:
    return [
        (
            "Product Management Fundamentals",
            "Learn core product management principles and methodologies",
            SKILL,
        ),
        (
            "User Research & Customer Development",
            "Master techniques for understanding user needs and problems",
            SKILL,
        ),
        (
            "Agile & Scrum Certification",
            "Become certified in agile product development methodologies",
            CERTIFICATION,
        ),
        (
            "Product Analytics",
            "Learn to use data to drive product decisions",
            COURSE,
        ),
        (
            "Product Launch Experience",
            "Lead or participate in a product launch from concept to market",
            EXPERIENCE,
        ),
        (
            "Product Management Case Study",
            "Create a detailed case study of a product improvement or launch",
            EXPERIENCE,
        ),
    ]


def _generic_steps(target_role: str) -> list[Step]:
    return [
        (
            "Core Skills Development",
            f"Develop the foundational skills required for {target_role}",
            SKILL,
        ),
        (
            "Professional Certification",
            f"Obtain industry-recognized certification relevant to {target_role}",
            CERTIFICATION,
        ),
        (
            "Advanced Training",
            "Complete specialized courses to deepen expertise",
            COURSE,
        ),
        (
            "Practical Experience",
            "Gain hands-on experience through projects or internships",
            EXPERIENCE,
        ),
        (
            "Leadership Development",
            "Develop management and leadership skills",
            SKILL,
        ),
        (
            "Portfolio Project",
            "Create a showcase project demonstrating all your skills",
            EXPERIENCE,
        ),
    ]


ROLE_TEMPLATES: list[RoleTemplate] = [
    RoleTemplate("data_scientist", _contains("data scientist"), _data_scientist_steps),
    RoleTemplate(
        "software_engineer",
        _contains("software engineer", "developer"),
        _software_engineer_steps,
    ),
    RoleTemplate("product_manager", _contains("product manager"), _product_manager_steps),
]

GENERIC_TEMPLATE = RoleTemplate("generic", lambda role: True, _generic_steps)


def select_template(target_role: str) -> RoleTemplate:
    """Pick the first template whose keywords appear in the role (case-insensitive)."""
    role = target_role.lower()
    for template in ROLE_TEMPLATES:
        if template.matches(role):
            return template
    return GENERIC_TEMPLATE


def generate_milestones(target_role: str) -> list[Milestone]:
    """Build the six seed milestones for a target role.

    The first milestone starts out completed in every template.
    """
    template = select_template(target_role)
    return [
        Milestone(
            id=str(order),
            title=title,
            description=description,
            category=category,
            completed=order == 1,
            order=order,
        )
        for order, (title, description, category) in enumerate(
            template.steps(target_role), start=1
        )
    ]

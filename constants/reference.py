"""Built-in reference data used when no external catalog is configured."""

from __future__ import annotations

from typing import Final

DEPARTMENTS: Final[tuple[str, ...]] = ("Engineering", "Marketing", "Sales", "HR", "Finance")

JOB_TYPES: Final[tuple[str, ...]] = ("Full-time", "Part-time", "Contract")

CONTRACT_JOB_TYPE: Final[str] = "Contract"

# Start dates for these departments must not fall on their weekend (Friday/Saturday).
WEEKEND_RESTRICTED_DEPARTMENTS: Final[frozenset[str]] = frozenset({"HR", "Finance"})

RELATIONSHIPS: Final[tuple[str, ...]] = (
    "Spouse",
    "Partner",
    "Parent",
    "Sibling",
    "Child",
    "Friend",
    "Other",
)

SKILLS_BY_DEPARTMENT: Final[dict[str, tuple[str, ...]]] = {
    "Engineering": (
        "Python",
        "TypeScript",
        "React",
        "SQL",
        "Cloud Infrastructure",
        "System Design",
        "Testing",
    ),
    "Marketing": (
        "SEO",
        "Content Writing",
        "Social Media",
        "Campaign Analytics",
        "Branding",
        "Email Marketing",
    ),
    "Sales": (
        "Negotiation",
        "Lead Generation",
        "CRM",
        "Account Management",
        "Cold Calling",
        "Forecasting",
    ),
    "HR": (
        "Recruiting",
        "Employee Relations",
        "Payroll",
        "Labor Law",
        "Onboarding",
        "Performance Reviews",
    ),
    "Finance": (
        "Accounting",
        "Budgeting",
        "Financial Modeling",
        "Auditing",
        "Tax Compliance",
        "Excel",
    ),
}

MANAGERS: Final[tuple[dict[str, str], ...]] = (
    {"id": "eng-1", "name": "Alice Johnson", "department": "Engineering"},
    {"id": "eng-2", "name": "Bob Smith", "department": "Engineering"},
    {"id": "mkt-1", "name": "Carol White", "department": "Marketing"},
    {"id": "sal-1", "name": "David Brown", "department": "Sales"},
    {"id": "sal-2", "name": "Eva Green", "department": "Sales"},
    {"id": "hr-1", "name": "Frank Miller", "department": "HR"},
    {"id": "fin-1", "name": "Grace Lee", "department": "Finance"},
)

PHONE_FORMAT_EXAMPLE: Final[str] = "+1-123-456-7890"

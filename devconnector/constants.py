"""
Application constants for DevConnector.

Contains the profile field vocabulary and GitHub request defaults.
"""

# =============================================================================
# Profile Fields
# =============================================================================

# Plain text fields copied from the create/update request when non-empty
PROFILE_TEXT_FIELDS = (
    "company",
    "website",
    "location",
    "bio",
    "status",
    "githubusername",
)

# Social platforms accepted as top-level request fields
SOCIAL_PLATFORMS = (
    "youtube",
    "twitter",
    "facebook",
    "linkedin",
    "instagram",
)

SKILLS_SEPARATOR = ","

# Largest id a signed 64-bit integer column holds
MAX_USER_ID = 2**63 - 1

# Embedded entry sections on a profile
EXPERIENCE = "experience"
EDUCATION = "education"
ENTRY_SECTIONS = (EXPERIENCE, EDUCATION)

# =============================================================================
# GitHub
# =============================================================================

GITHUB_USER_AGENT = "DevConnector/1.0"
GITHUB_ACCEPT = "application/vnd.github.v3+json"
GITHUB_REPOS_SORT = "created"
GITHUB_REPOS_DIRECTION = "asc"

# canonical profile record (empty lists – no placeholders)
PROFILE_SCHEMA = {
    "full_name": "",
    "headline": "",
    "about": "",
    "email": "",
    "phone": "",
    "location": "",
    "website": "",
    "linkedin": "",
    "github": "",
    "avatar_url": "",
    "skills": [],
    "experience": [],
    "education": [],
    "projects": [],
}

SCALAR_FIELDS = tuple(k for k, v in PROFILE_SCHEMA.items() if isinstance(v, str))

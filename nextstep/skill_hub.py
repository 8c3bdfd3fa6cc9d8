"""
Skill trend explorer.

• Asks the chat model for the trending skills of a given year as JSON.
• Caches responses in <cache>/skills/<sha256>.json so the model is
  queried only once per unique prompt.
• Falls back to a built-in list when the model or its JSON lets us down.
"""

from __future__ import annotations
import json, logging, re, textwrap
from dataclasses import asdict, dataclass
from pathlib import Path

from nextstep import config
from nextstep.llm_client import ChatError, LLMClient, chat
from nextstep.utils import _sha

logger = logging.getLogger(__name__)

TRENDING_LIMIT = 8

SKILL_CATEGORIES = {
    "programming": "Programming",
    "design": "Design",
    "data": "Data Science",
    "management": "Management",
    "security": "Cybersecurity",
    "cloud": "Cloud & DevOps",
    "ai": "AI & ML",
    "marketing": "Marketing",
}


@dataclass(frozen=True)
class TrendingSkill:
    name: str
    demand: int
    growth: str
    category: str

    @classmethod
    def from_dict(cls, data: dict) -> "TrendingSkill":
        category = str(data.get("category", "")).lower()
        return cls(
            name=str(data["name"]).strip(),
            demand=max(0, min(100, int(data.get("demand", 0)))),
            growth=str(data.get("growth", "")),
            category=category if category in SKILL_CATEGORIES else "programming",
        )


@dataclass(frozen=True)
class TrendingResult:
    skills: list[TrendingSkill]
    used_fallback: bool = False


FALLBACK_TRENDING = [
    TrendingSkill("Generative AI", 95, "+180%", "ai"),
    TrendingSkill("Prompt Engineering", 88, "+250%", "ai"),
    TrendingSkill("Kubernetes", 85, "+45%", "cloud"),
    TrendingSkill("Rust", 78, "+120%", "programming"),
    TrendingSkill("Data Engineering", 90, "+65%", "data"),
    TrendingSkill("Product Management", 82, "+30%", "management"),
]

_TRENDING_PROMPT = textwrap.dedent(
    """\
List the top 8 most in-demand and trending tech/professional skills in the job market right now in {year}. For each skill provide:
- name: the skill name
- demand: a number from 60-98 representing current job market demand percentage
- growth: year-over-year growth as a string like "+120%"
- category: one of these exact values: {categories}

Respond ONLY with a valid JSON array, no markdown, no explanation. Example format:
[{{"name":"Skill Name","demand":90,"growth":"+120%","category":"ai"}}]"""
)

_ANALYSIS_PROMPT = textwrap.dedent(
    """\
Provide a comprehensive analysis of "{skill}" as a career skill. Include:

1. **Overview**: Brief description of the skill and its importance (2-3 sentences)
2. **Market Demand**: Current job market demand and trends
3. **Salary Impact**: How this skill affects earning potential
4. **Learning Path**: Recommended steps to learn this skill (3-5 steps)
5. **Top Resources**: 3-4 specific learning resources (courses, books, websites)
6. **Related Skills**: 4-5 complementary skills to learn
7. **Job Roles**: 3-4 job titles that require this skill

Format with clear sections and bullet points. Be specific with resource names and realistic with assessments."""
)

_FENCE = re.compile(r"^```(?:json)?\s*|\s*```$")
_ARRAY_FINDER = re.compile(r"\[.*\]", re.S)


def _extract_json_array(raw: str) -> list:
    text = _FENCE.sub("", raw.strip())
    try:
        data = json.loads(text)
    except json.JSONDecodeError:
        if m := _ARRAY_FINDER.search(text):
            data = json.loads(m.group())
        else:
            raise
    if not isinstance(data, list):
        raise ValueError("Invalid response format")
    return data


def parse_trending(raw: str) -> list[TrendingSkill]:
    skills = [TrendingSkill.from_dict(item) for item in _extract_json_array(raw)
              if isinstance(item, dict) and item.get("name")]
    if not skills:
        raise ValueError("Invalid response format")
    return skills[:TRENDING_LIMIT]


def fetch_trending_skills(year: int, client: LLMClient | None = None,
                          cache_dir: Path | str | None = None) -> TrendingResult:
    prompt = _TRENDING_PROMPT.format(year=year, categories=", ".join(SKILL_CATEGORIES))
    cache_root = Path(cache_dir) if cache_dir else config.CACHE_DIR
    cache_path = cache_root / "skills" / f"{_sha(prompt)}.json"

    if cache_path.exists():
        logger.debug("Trending skills for %s served from cache", year)
        cached = json.loads(cache_path.read_text(encoding="utf-8"))
        return TrendingResult([TrendingSkill.from_dict(s) for s in cached])

    try:
        reply = chat([{"role": "user", "content": prompt}], client=client)
        skills = parse_trending(reply)
    except (ChatError, ValueError, KeyError, TypeError) as exc:
        logger.warning("Trending skills unavailable, using fallback: %s", exc)
        return TrendingResult(list(FALLBACK_TRENDING), used_fallback=True)

    cache_path.parent.mkdir(parents=True, exist_ok=True)
    cache_path.write_text(json.dumps([asdict(s) for s in skills], ensure_ascii=False, indent=2),
                          encoding="utf-8")
    return TrendingResult(skills)


def analyze_skill(skill: str, client: LLMClient | None = None) -> str:
    skill = (skill or "").strip()
    if not skill:
        raise ValueError("skill name is required")
    return chat([{"role": "user", "content": _ANALYSIS_PROMPT.format(skill=skill)}], client=client)

"""Canonical skill vocabulary and alias table.

Pure data plus a small immutable container. Extraction code only ever asks a
``SkillVocabulary`` two questions (is this a skill, what does this alias map
to), so adding skills or aliases never requires touching the extractor.
"""

from types import MappingProxyType
from typing import Mapping

# ---------------------------------------------------------------------------
# Canonical skills, grouped by category
# ---------------------------------------------------------------------------
SKILL_CATEGORIES: dict[str, tuple[str, ...]] = {
    "languages": (
        "javascript", "typescript", "python", "java", "golang", "rust",
        "c", "c++", "c#", "ruby", "php", "kotlin", "swift", "scala", "r",
        "matlab", "bash", "shell",
    ),
    "frontend": (
        "react", "vuejs", "angular", "nextjs", "svelte", "html", "css",
        "tailwindcss", "redux", "webpack", "vite", "storybook", "jquery",
        "bootstrap", "sass",
    ),
    "backend": (
        "nodejs", "express", "django", "flask", "fastapi", "spring", "rails",
        "laravel", "nestjs", "graphql", "rest", "grpc", "websockets", "hapi",
        "koa",
    ),
    "databases": (
        "mongodb", "postgresql", "mysql", "sqlite", "redis", "elasticsearch",
        "cassandra", "dynamodb", "firebase", "supabase", "oracle", "mssql",
    ),
    "devops": (
        "docker", "kubernetes", "aws", "google cloud", "azure", "terraform",
        "ansible", "cicd", "github actions", "jenkins", "nginx", "linux",
        "vagrant",
    ),
    "ai/ml": (
        "machine learning", "deep learning", "tensorflow", "pytorch",
        "scikit-learn", "pandas", "numpy", "natural language processing",
        "computer vision", "llm",
    ),
    "testing": (
        "testing", "jest", "pytest", "cypress", "selenium", "mocha",
        "jasmine", "vitest",
    ),
    "tools": (
        "git", "agile", "scrum", "system design", "microservices", "kafka",
        "rabbitmq", "oauth", "jwt", "security", "blockchain", "solidity",
        "figma", "jira",
    ),
}

# ---------------------------------------------------------------------------
# Aliases: normalized raw phrase -> canonical skill
# ---------------------------------------------------------------------------
SKILL_ALIASES: dict[str, str] = {
    # React
    "reactjs": "react",
    "react.js": "react",
    "react js": "react",
    # Node
    "node": "nodejs",
    "node.js": "nodejs",
    "node js": "nodejs",
    # Express
    "expressjs": "express",
    "express.js": "express",
    # MongoDB
    "mongo": "mongodb",
    "mongoose": "mongodb",
    # PostgreSQL
    "postgres": "postgresql",
    "pg": "postgresql",
    "psql": "postgresql",
    # Kubernetes
    "k8s": "kubernetes",
    "kube": "kubernetes",
    # JavaScript / TypeScript
    "js": "javascript",
    "ts": "typescript",
    "es6": "javascript",
    "es2015": "javascript",
    # Python
    "py": "python",
    # Vue
    "vue": "vuejs",
    "vue.js": "vuejs",
    # Next.js
    "next": "nextjs",
    "next.js": "nextjs",
    # Nest
    "nest.js": "nestjs",
    # AWS
    "aws lambda": "aws",
    "amazon s3": "aws",
    "amazon web services": "aws",
    "ec2": "aws",
    # GCP
    "gcp": "google cloud",
    "google cloud platform": "google cloud",
    # Azure
    "microsoft azure": "azure",
    # CI/CD ("ci/cd" loses its slash during tokenization, "ci cd" catches it)
    "ci/cd": "cicd",
    "ci cd": "cicd",
    "continuous integration": "cicd",
    "continuous deployment": "cicd",
    # CSS variants
    "scss": "css",
    "less": "css",
    "tailwind": "tailwindcss",
    # REST
    "rest api": "rest",
    "restful": "rest",
    "restful api": "rest",
    # GraphQL
    "graphql api": "graphql",
    # ML
    "ml": "machine learning",
    "ai": "machine learning",
    "nlp": "natural language processing",
    "cv": "computer vision",
    "sklearn": "scikit-learn",
    # Testing
    "unit testing": "testing",
    "integration testing": "testing",
    "e2e": "testing",
    "tdd": "testing",
    # Redux
    "redux toolkit": "redux",
    "redux-toolkit": "redux",
    # Linux
    "unix": "linux",
    # Spring
    "spring boot": "spring",
    "spring framework": "spring",
    # Django REST
    "django rest": "django",
    "drf": "django",
    # FastAPI
    "fast api": "fastapi",
    # Git
    "github": "git",
    "gitlab": "git",
    "bitbucket": "git",
    # Docker
    "docker compose": "docker",
    "dockerfile": "docker",
    # Terraform
    "terraform cloud": "terraform",
    # Kafka
    "apache kafka": "kafka",
    # RabbitMQ
    "rabbit mq": "rabbitmq",
    # Elasticsearch
    "elastic search": "elasticsearch",
    "elk": "elasticsearch",
    # Agile
    "kanban": "agile",
    "sprint": "scrum",
}


class SkillVocabulary:
    """Read-only snapshot of the skill set, alias table and categories.

    Membership and alias lookups are case-insensitive and O(1). Instances are
    never mutated after construction; to change the vocabulary build a new one
    and pass it to the extraction functions.
    """

    __slots__ = ("_skills", "_aliases", "_categories")

    def __init__(
        self,
        categories: Mapping[str, tuple[str, ...] | list[str]],
        aliases: Mapping[str, str] | None = None,
    ) -> None:
        skill_to_category: dict[str, str] = {}
        for category, skills in categories.items():
            for skill in skills:
                skill_to_category.setdefault(skill.lower().strip(), category)

        alias_map: dict[str, str] = {}
        for raw, canonical in (aliases or {}).items():
            target = canonical.lower().strip()
            if target not in skill_to_category:
                raise ValueError(f"Alias {raw!r} points to unknown skill {canonical!r}")
            alias_map[raw.lower().strip()] = target

        object.__setattr__(self, "_skills", frozenset(skill_to_category))
        object.__setattr__(self, "_aliases", MappingProxyType(alias_map))
        object.__setattr__(self, "_categories", MappingProxyType(skill_to_category))

    def __setattr__(self, name, value):
        raise AttributeError("SkillVocabulary is immutable")

    @classmethod
    def from_tables(
        cls,
        categories: Mapping[str, tuple[str, ...] | list[str]],
        aliases: Mapping[str, str] | None = None,
    ) -> "SkillVocabulary":
        return cls(categories, aliases)

    def __contains__(self, skill: object) -> bool:
        if not isinstance(skill, str):
            return False
        return skill.lower() in self._skills

    def __len__(self) -> int:
        return len(self._skills)

    @property
    def skills(self) -> frozenset[str]:
        return self._skills

    @property
    def aliases(self) -> Mapping[str, str]:
        return self._aliases

    def resolve_alias(self, phrase: str) -> str:
        """Map a cleaned phrase to its canonical name, or return it unchanged."""
        key = phrase.lower()
        return self._aliases.get(key, key)

    def category_of(self, skill: str) -> str | None:
        return self._categories.get(skill.lower()) if isinstance(skill, str) else None


DEFAULT_VOCABULARY = SkillVocabulary.from_tables(SKILL_CATEGORIES, SKILL_ALIASES)

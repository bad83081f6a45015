"""Bilingual (English/Indonesian) skill taxonomy.

Keys of ``SKILL_DICTIONARY`` are the canonical tags stored downstream; values
are the surface aliases that map to them. Aliases are lower-case and matched
literally, so punctuation such as ``.``, ``#`` or ``/`` needs no escaping here.
Plain English words ("go", "express", "sketch") are only listed in their
unambiguous spellings.
"""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping

SKILL_TAXONOMY = [
    # Languages
    {"canonical_skill": "javascript", "synonyms": ["javascript", "js"]},
    {"canonical_skill": "typescript", "synonyms": ["typescript", "ts"]},
    {"canonical_skill": "python", "synonyms": ["python"]},
    {"canonical_skill": "java", "synonyms": ["java"]},
    {"canonical_skill": "c#", "synonyms": ["c#", "csharp", "c sharp"]},
    {"canonical_skill": "php", "synonyms": ["php"]},
    {"canonical_skill": "ruby", "synonyms": ["ruby", "ruby on rails"]},
    {"canonical_skill": "go", "synonyms": ["golang", "go lang"]},
    # Frameworks
    {"canonical_skill": "react", "synonyms": ["react", "reactjs", "react.js"]},
    {"canonical_skill": "angular", "synonyms": ["angular", "angularjs"]},
    {"canonical_skill": "vue.js", "synonyms": ["vue", "vuejs", "vue.js"]},
    {"canonical_skill": "next.js", "synonyms": ["next.js", "nextjs"]},
    {"canonical_skill": "node.js", "synonyms": ["node.js", "nodejs", "node js"]},
    {"canonical_skill": "express", "synonyms": ["express.js", "expressjs"]},
    {"canonical_skill": "django", "synonyms": ["django"]},
    {"canonical_skill": "flask", "synonyms": ["flask"]},
    {"canonical_skill": "laravel", "synonyms": ["laravel"]},
    {"canonical_skill": "spring boot", "synonyms": ["spring boot", "springboot"]},
    # Frontend
    {"canonical_skill": "html", "synonyms": ["html", "html5"]},
    {"canonical_skill": "css", "synonyms": ["css", "css3"]},
    {"canonical_skill": "sass", "synonyms": ["sass", "scss"]},
    {"canonical_skill": "tailwind css", "synonyms": ["tailwind css", "tailwindcss", "tailwind"]},
    {"canonical_skill": "bootstrap", "synonyms": ["bootstrap"]},
    # Databases
    {"canonical_skill": "sql", "synonyms": ["sql"]},
    {"canonical_skill": "mysql", "synonyms": ["mysql"]},
    {"canonical_skill": "postgresql", "synonyms": ["postgresql", "postgres"]},
    {"canonical_skill": "mongodb", "synonyms": ["mongodb", "mongo"]},
    {"canonical_skill": "redis", "synonyms": ["redis"]},
    # DevOps and cloud
    {"canonical_skill": "docker", "synonyms": ["docker"]},
    {"canonical_skill": "kubernetes", "synonyms": ["kubernetes", "k8s"]},
    {"canonical_skill": "aws", "synonyms": ["aws", "amazon web services"]},
    {"canonical_skill": "google cloud", "synonyms": ["google cloud", "gcp", "google cloud platform"]},
    {"canonical_skill": "azure", "synonyms": ["azure", "microsoft azure"]},
    {"canonical_skill": "git", "synonyms": ["git", "github", "gitlab"]},
    # Design
    {
        "canonical_skill": "ui/ux",
        "synonyms": ["ui/ux", "ui ux", "desain ui/ux", "perancangan ui/ux"],
    },
    {"canonical_skill": "figma", "synonyms": ["figma"]},
    {"canonical_skill": "adobe xd", "synonyms": ["adobe xd"]},
    {"canonical_skill": "sketch", "synonyms": ["sketch app", "bohemian sketch"]},
    # Management
    {"canonical_skill": "product management", "synonyms": ["product management", "manajemen produk"]},
    {"canonical_skill": "agile", "synonyms": ["agile", "metodologi agile"]},
    {"canonical_skill": "scrum", "synonyms": ["scrum"]},
    # Data and AI
    {"canonical_skill": "data analysis", "synonyms": ["data analysis", "analisis data", "analisa data"]},
    {
        "canonical_skill": "machine learning",
        "synonyms": ["machine learning", "pembelajaran mesin", "kecerdasan buatan"],
    },
    {"canonical_skill": "tensorflow", "synonyms": ["tensorflow"]},
    {"canonical_skill": "pytorch", "synonyms": ["pytorch"]},
]


def build_skill_dictionary(taxonomy: list[dict]) -> Mapping[str, tuple[str, ...]]:
    """Freeze a taxonomy list into a read-only ``canonical -> aliases`` mapping."""
    return MappingProxyType({
        entry["canonical_skill"]: tuple(alias.lower() for alias in entry["synonyms"])
        for entry in taxonomy
    })


SKILL_DICTIONARY: Mapping[str, tuple[str, ...]] = build_skill_dictionary(SKILL_TAXONOMY)

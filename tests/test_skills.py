import pytest

from extractors.skills import SkillMatcher, extract_skills
from vocab.skill_taxonomy import SKILL_DICTIONARY, SKILL_TAXONOMY, build_skill_dictionary


def test_extract_skills_maps_aliases_to_canonical_tags():
    skills = extract_skills("Proficient in ReactJS and Node.js development")
    assert skills == frozenset({"react", "node.js"})


def test_extract_skills_indonesian_aliases():
    text = "Berpengalaman dalam analisis data dan pembelajaran mesin, desain UI/UX."
    assert extract_skills(text) == frozenset({"data analysis", "machine learning", "ui/ux"})


def test_extract_skills_respects_word_boundaries():
    assert extract_skills("Expert in JavaScript and MySQL") == frozenset({"javascript", "mysql"})


def test_extract_skills_matches_punctuated_aliases_literally():
    assert extract_skills("reactXjs, vueXjs and uiXux") == frozenset()


def test_extract_skills_no_duplicates_and_only_known_tags():
    text = "React, ReactJS, react.js, JS, JavaScript, GitHub, GitLab, git"
    skills = extract_skills(text)
    assert skills == frozenset({"react", "javascript", "git"})
    assert skills <= set(SKILL_DICTIONARY)


def test_extract_skills_empty_text():
    assert extract_skills("   ") == frozenset()


def test_skill_matcher_custom_dictionary_with_symbols():
    matcher = SkillMatcher({"c++": ("c++", "cpp"), "c#": ("c#", "csharp")})
    assert matcher.extract("Wrote C++ and CSharp services") == frozenset({"c++", "c#"})


def test_skill_matcher_results_are_independent_between_calls():
    matcher = SkillMatcher()
    first = matcher.extract("docker")
    second = matcher.extract("kubernetes")
    assert first == frozenset({"docker"})
    assert second == frozenset({"kubernetes"})


def test_skill_dictionary_is_read_only():
    with pytest.raises(TypeError):
        SKILL_DICTIONARY["cobol"] = ("cobol",)


def test_build_skill_dictionary_lowercases_aliases():
    dictionary = build_skill_dictionary(
        [{"canonical_skill": "sql", "synonyms": ["SQL", "T-SQL"]}]
    )
    assert dictionary["sql"] == ("sql", "t-sql")
    assert len(SKILL_DICTIONARY) == len(SKILL_TAXONOMY)


def test_extract_skills_backend_and_ml_stack():
    text = "Built Laravel and Django services in PHP and C#, cached in Redis, models in PyTorch"
    assert extract_skills(text) == frozenset(
        {"laravel", "django", "php", "c#", "redis", "pytorch"}
    )


def test_extract_skills_skips_plain_english_words():
    text = "Happy to go the extra mile, express ideas clearly and sketch wireframes"
    assert extract_skills(text) == frozenset()
    assert extract_skills("Services written in Golang") == frozenset({"go"})

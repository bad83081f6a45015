from extractors.education import parse_education
from talent.models import EducationEntry


def test_year_range_line_and_degree():
    lines = ["Universitas Indonesia 2016 – 2020", "Sarjana Komputer"]
    assert parse_education(lines) == [
        EducationEntry(school="Universitas Indonesia", degree="Sarjana Komputer", date_range="2016 – 2020")
    ]


def test_parenthesised_range_and_multiple_entries():
    lines = [
        "Institut Teknologi Bandung (2012 - 2016)",
        "S1 Teknik Informatika",
        "Organised the campus hackathon",
        "SMA Negeri 8 Jakarta 2009—2012",
        "IPA",
    ]
    entries = parse_education(lines)
    assert [(e.school, e.degree) for e in entries] == [
        ("Institut Teknologi Bandung", "S1 Teknik Informatika"),
        ("SMA Negeri 8 Jakarta", "IPA"),
    ]
    assert entries[1].date_range == "2009—2012"


def test_single_year_is_not_an_entry():
    assert parse_education(["Graduated 2020", "Bachelor of Science"]) == []


def test_missing_degree_or_school_discards_entry():
    assert parse_education(["Universitas Gadjah Mada 2015 - 2019"]) == []
    assert parse_education(["2015 - 2019", "Bachelor of Economics"]) == []


def test_consecutive_range_lines():
    lines = [
        "Universitas Padjadjaran 2010 - 2014",
        "Universitas Brawijaya 2014 - 2016",
        "Magister Manajemen",
    ]
    entries = parse_education(lines)
    assert entries == [
        EducationEntry(school="Universitas Brawijaya", degree="Magister Manajemen", date_range="2014 - 2016")
    ]

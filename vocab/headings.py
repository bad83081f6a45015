"""Default section heading phrases (English and Indonesian).

These are only defaults: ``talent.config.SectionSettings`` reads each group
from the environment, so new phrasings or locales need no code change.
"""

EXPERIENCE_HEADINGS = [
    "work experience",
    "working experience",
    "professional experience",
    "employment history",
    "work history",
    "experience",
    "pengalaman kerja",
    "pengalaman bekerja",
    "pengalaman profesional",
    "riwayat pekerjaan",
    "pengalaman",
]

EDUCATION_HEADINGS = [
    "education",
    "educational background",
    "academic background",
    "pendidikan",
    "riwayat pendidikan",
    "latar belakang pendidikan",
]

SKILL_HEADINGS = [
    "skills",
    "technical skills",
    "core skills",
    "keahlian",
    "keterampilan",
    "kemampuan",
]

CERTIFICATE_HEADINGS = [
    "certificates",
    "certifications",
    "licenses & certifications",
    "sertifikat",
    "sertifikasi",
]

OTHER_HEADINGS = [
    "projects",
    "organizations",
    "organisational experience",
    "awards",
    "languages",
    "proyek",
    "organisasi",
    "pengalaman organisasi",
    "penghargaan",
    "bahasa",
]

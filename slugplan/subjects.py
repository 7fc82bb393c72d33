"""
Static registry of the catalog subjects known to the parser.

Each subject has:
- a display name (catalog-exact casing; its upper-case form is the section header)
- a short filing prefix used for course ids
- a section label that is repeated at the top of every page inside the section

The table is defined once at import time and never changes at runtime.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from slugplan.model import Subject


# Art History prints regional sub-headings between its courses
_HAVC_HEADINGS = (
    "Europe and the Americas",
    "Modern Art and Visual Culture in \nEurope and the Americas",
    "Renaissance",
    "Oceania and its Diaspora",
    "Cross-Regional Studies",
)


def _subject(
    key: str,
    name: str,
    prefix: str,
    label: Optional[str] = None,
    headings: Tuple[str, ...] = (),
) -> Subject:
    return Subject(
        key=key,
        display_name=name,
        prefix=prefix,
        section_label=label if label is not None else name,
        extra_headings=headings,
    )


_SUBJECTS: Tuple[Subject, ...] = (
    _subject("AcadEnglish", "Academic English", "ACEN"),
    _subject("AmericanStudies", "American Studies", "AMST"),
    _subject("Anthropology", "Anthropology", "ANTH"),
    _subject("AppliedMath", "Applied Mathematics and Statistics", "AMS"),
    _subject("Art", "Art", "ART"),
    _subject("Arts", "Arts", "ARTS", label="Arts Division"),
    _subject("Astronomy", "Astronomy and Astrophysics", "ASTR"),
    _subject("Biochemistry", "Biochemistry and Molecular Biology", "BIOC"),
    _subject("BiomolecularEng", "Biomolecular Engineering", "BME"),
    _subject("Chemistry", "Chemistry and Biochemistry", "CHEM"),
    _subject("Chinese", "Chinese", "CHIN"),
    _subject("Classics", "Classical Studies", "CLST"),
    _subject("CommunityStudies", "Community Studies", "CMMU"),
    _subject("ComputationalMedia", "Computational Media", "CMPM"),
    _subject("ComputerEng", "Computer Engineering", "CMPE"),
    _subject("ComputerScience", "Computer Science", "CMPS"),
    _subject("CriticalRace", "Critical Race and Ethnic Studies", "CRES"),
    _subject("DigitalArts", "Digital Arts and New Media", "DANM"),
    _subject("EarthSciences", "Earth and Planetary Sciences", "EART"),
    _subject("Ecology", "Ecology and Evolutionary Biology", "BIOE"),
    _subject("Economics", "Economics", "ECON"),
    _subject("Education", "Education", "EDUC"),
    _subject("ElectricalEng", "Electrical Engineering", "EE"),
    _subject("Engineering", "Engineering", "ENGR", label="Baskin School of Engineering"),
    _subject("English", "English", "ENGL"),
    _subject("EnvironmentalStudies", "Environmental Studies", "ENVS"),
    _subject("FeministStudies", "Feminist Studies", "FMST"),
    _subject("Film", "Film and Digital Media", "FILM"),
    _subject("French", "French", "FREN"),
    _subject("German", "German", "GERM"),
    _subject("Greek", "Greek", "GREE"),
    _subject("Hebrew", "Hebrew", "HEBR"),
    _subject("History", "History", "HIS"),
    _subject(
        "HistoryArt",
        "History of Art and Visual Culture",
        "HAVC",
        headings=_HAVC_HEADINGS,
    ),
    _subject("HistoryConsciousness", "History of Consciousness", "HISC"),
    _subject("Italian", "Italian", "ITAL"),
    _subject("Japanese", "Japanese", "JAPN"),
    _subject("JewishStudies", "Jewish Studies", "JWST"),
    _subject("LanguageStudies", "Language Studies", "LGST"),
    _subject("Latin", "Latin", "LATN"),
    _subject("LatinAmerican", "Latin American and Latino Studies", "LALS"),
    _subject("Linguistics", "Linguistics", "LING"),
    _subject("Literature", "Literature", "LIT"),
    _subject("Mathematics", "Mathematics", "MATH"),
    _subject("Microbiology", "Microbiology and Environmental Toxicology", "METX"),
    _subject("MolecularBiology", "Molecular, Cell, and Developmental Biology", "BIOL"),
    _subject("Music", "Music", "MUSC"),
    _subject("OceanSciences", "Ocean Sciences", "OCEA"),
    _subject("Philosophy", "Philosophy", "PHIL"),
    _subject("PhysicalEducation", "Physical Education", "PHYE"),
    _subject("Physics", "Physics", "PHYS"),
    _subject("Politics", "Politics", "POLI"),
    _subject("Portuguese", "Portuguese", "PORT"),
    _subject("Psychology", "Psychology", "PSYC"),
    _subject("Russian", "Russian", "RUSS"),
    _subject("Sociology", "Sociology", "SOCY"),
    _subject("Spanish", "Spanish", "SPAN"),
    _subject("TechManagement", "Technology and Information Management", "TIM"),
    _subject("TheaterArts", "Theater Arts", "THEA"),
    _subject("Writing", "Writing", "WRIT"),
    _subject("Yiddish", "Yiddish", "YIDD"),
)


def all_subjects() -> List[Subject]:
    """
    Return every known subject in registry order.
    """
    return list(_SUBJECTS)


def display_name(subject: Subject) -> str:
    return subject.display_name


def prefix(subject: Subject) -> str:
    return subject.prefix


def section_label(subject: Subject) -> str:
    return subject.section_label


def header_text(subject: Subject) -> str:
    """
    The section header as printed in the catalog: the upper-cased display name.
    """
    return subject.display_name.upper()


def _build_header_index() -> Dict[str, Subject]:
    index: Dict[str, Subject] = {}
    for s in _SUBJECTS:
        # first registry entry wins if two names collide after upper-casing
        index.setdefault(header_text(s), s)
    return index


_BY_HEADER = _build_header_index()


def subject_for_header(header: str) -> Subject:
    """
    Map a section header (as produced by header_text) back to its subject.
    Raises KeyError for text that is not a registry header.
    """
    return _BY_HEADER[header]


def find_subject(text: str) -> Optional[Subject]:
    """
    Look up a subject by key, prefix or display name (case-insensitive).
    Used by the CLI filters.
    """
    needle = text.strip().lower()
    if not needle:
        return None
    for s in _SUBJECTS:
        if needle in (s.key.lower(), s.prefix.lower(), s.display_name.lower()):
            return s
    return None

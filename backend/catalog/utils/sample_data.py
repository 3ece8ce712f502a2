"""Sample catalog loaded at start-up for GHS Govt. PG College, Sujangarh."""

from typing import List

from ..models import MaterialDraft

INSTITUTION = "GHS Govt. PG College, Sujangarh"
_COVER = "https://images.unsplash.com/photo-{}?ixlib=rb-1.2.1&auto=format&fit=crop&w=400&h=200&q=80"

SAMPLE_MATERIALS = [
    {
        "title": "B.Sc. 1st Year - Mechanics and Waves",
        "description": "Comprehensive textbook for B.Sc. Physics first year students covering mechanics and wave motion.",
        "category": "book",
        "subject": "physics",
        "year_level": "bsc_first_year",
        "author": "Dr. Sharma",
        "file_path": "/files/bsc-physics-1st-mechanics.pdf",
        "cover": "1636466497217-06a7271ca337",
        "featured": True,
    },
    {
        "title": "Inorganic Chemistry Notes - B.Sc. 1st Year",
        "description": "Detailed lecture notes on inorganic chemistry for first year B.Sc. students.",
        "category": "notes",
        "subject": "chemistry",
        "year_level": "bsc_first_year",
        "author": "Prof. Gupta",
        "file_path": "/files/bsc-chem-1st-inorganic-notes.pdf",
        "cover": "1603126857599-f6e157fa2fe6",
        "featured": True,
    },
    {
        "title": "Calculus and Differential Equations - B.Sc. 1st Year",
        "description": "Essential mathematics textbook for first year B.Sc. students covering calculus and differential equations.",
        "category": "book",
        "subject": "mathematics",
        "year_level": "bsc_first_year",
        "author": "Dr. Verma",
        "file_path": "/files/bsc-math-1st-calculus.pdf",
        "cover": "1635070041078-e363dbe005cb",
        "featured": True,
    },
    {
        "title": "B.Sc. 2nd Year - Thermodynamics and Statistical Mechanics",
        "description": "Comprehensive notes on thermodynamics and statistical mechanics for Physics students.",
        "category": "notes",
        "subject": "physics",
        "year_level": "bsc_second_year",
        "author": "Dr. Yadav",
        "file_path": "/files/bsc-physics-2nd-thermo.pdf",
        "cover": "1457369804613-52c61a468e7d",
        "featured": True,
    },
    {
        "title": "Organic Chemistry - B.Sc. 2nd Year",
        "description": "Complete organic chemistry textbook for second year B.Sc. students.",
        "category": "book",
        "subject": "chemistry",
        "year_level": "bsc_second_year",
        "author": "Prof. Sharma",
        "file_path": "/files/bsc-chem-2nd-organic.pdf",
        "cover": "1532094349884-543bc11b234d",
        "featured": False,
    },
    {
        "title": "Linear Algebra and Abstract Algebra - B.Sc. 2nd Year",
        "description": "Comprehensive mathematics textbook covering linear algebra and abstract algebra for second year students.",
        "category": "book",
        "subject": "mathematics",
        "year_level": "bsc_second_year",
        "author": "Dr. Singh",
        "file_path": "/files/bsc-math-2nd-linear-algebra.pdf",
        "cover": "1509228468518-180dd4864904",
        "featured": False,
    },
    {
        "title": "B.Sc. Physics - Previous Year Papers (2023)",
        "description": "Collection of previous year examination papers for B.Sc. Physics students from 2023.",
        "category": "past_paper",
        "subject": "physics",
        "year_level": "bsc_third_year",
        "author": "Examination Department",
        "file_path": "/files/bsc-physics-past-papers-2023.pdf",
        "cover": "1588072432836-e10032774350",
        "featured": False,
    },
    {
        "title": "B.Sc. Chemistry - Previous Year Papers (2023)",
        "description": "Collection of previous year examination papers for B.Sc. Chemistry students from 2023.",
        "category": "past_paper",
        "subject": "chemistry",
        "year_level": "bsc_third_year",
        "author": "Examination Department",
        "file_path": "/files/bsc-chemistry-past-papers-2023.pdf",
        "cover": "1562411052-8939603c3d46",
        "featured": False,
    },
    {
        "title": "B.Sc. Mathematics - Previous Year Papers (2023)",
        "description": "Collection of previous year examination papers for B.Sc. Mathematics students from 2023.",
        "category": "past_paper",
        "subject": "mathematics",
        "year_level": "bsc_third_year",
        "author": "Examination Department",
        "file_path": "/files/bsc-math-past-papers-2023.pdf",
        "cover": "1596495577886-d920f1fb7238",
        "featured": False,
    },
    {
        "title": "Quantum Mechanics - B.Sc. 3rd Year",
        "description": "Advanced quantum mechanics textbook for final year B.Sc. Physics students.",
        "category": "book",
        "subject": "physics",
        "year_level": "bsc_third_year",
        "author": "Dr. Kumar",
        "file_path": "/files/bsc-physics-3rd-quantum.pdf",
        "cover": "1635070041078-e363dbe005cb",
        "featured": False,
    },
    {
        "title": "Physical Chemistry - B.Sc. 3rd Year",
        "description": "Comprehensive physical chemistry notes for final year B.Sc. students.",
        "category": "notes",
        "subject": "chemistry",
        "year_level": "bsc_third_year",
        "author": "Prof. Meena",
        "file_path": "/files/bsc-chem-3rd-physical.pdf",
        "cover": "1616593873653-e516b1391238",
        "featured": False,
    },
    {
        "title": "Real Analysis and Complex Analysis - B.Sc. 3rd Year",
        "description": "Advanced mathematics textbook covering real and complex analysis for final year students.",
        "category": "book",
        "subject": "mathematics",
        "year_level": "bsc_third_year",
        "author": "Dr. Sharma",
        "file_path": "/files/bsc-math-3rd-analysis.pdf",
        "cover": "1594912772125-0f397a95f930",
        "featured": False,
    },
]


def sample_drafts() -> List[MaterialDraft]:
    """Build fresh drafts for the sample catalog, in display order."""
    drafts = []
    for item in SAMPLE_MATERIALS:
        fields = {k: v for k, v in item.items() if k != "cover"}
        drafts.append(MaterialDraft(**fields, institution=INSTITUTION, cover_image=_COVER.format(item["cover"])))
    return drafts

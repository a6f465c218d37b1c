"""
PSX Analytics Core Metadata
---------------------------
Houses global metadata for versioning and attribution.

Every surface (Streamlit pages, FastAPI backend, CLI) reads this
module so version and credits stay in one place.
"""

__project__ = "PSX Analytics Companion"
__version__ = "1.0.0"
__author__ = "Muhammad Imran Shabbir"
__course__ = "Adv. Big Data Analytics"
__instructor__ = "Dr. Amjad Farooq"
__institution__ = "University of Engineering and Technology, Lahore - MSDS - Weekend"

CORE_METADATA = {
    "project": __project__,
    "version": __version__,
    "author": __author__,
    "author_id": "2025-MSDS-102",
    "course": __course__,
    "instructor": __instructor__,
    "institution": __institution__,
    "description": (
        "Ready-to-run Python snippets for Pakistan Stock Exchange analytics, "
        "from data collection to machine learning, packaged for Google Colab."
    ),
}

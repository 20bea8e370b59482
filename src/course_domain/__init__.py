"""course-domain: always-valid Course entities built from value objects."""

__version__ = "0.1.0"

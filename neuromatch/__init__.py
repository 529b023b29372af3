"""
Neurodiversity-aware course matching service.

Courses from an in-memory catalog are filtered by topic and scored
against a learner's neurotype profile and stated preferences.  Nothing
is retained between requests.
"""
__version__ = "1.0.0"

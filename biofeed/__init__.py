"""biofeed - RSS/Atom feed normalizer for link-in-bio profile pages."""

__version__ = "0.1.0"

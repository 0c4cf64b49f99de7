"""Hot Tabs: jump straight to the Nth pinned or unpinned document tab."""

__version__ = "2.0.0"

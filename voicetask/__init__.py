"""voicetask: turns voice transcripts into task drafts."""

__version__ = "0.1.0"

"""gizz: content index and site tooling for the Get Into Gizz discography site."""

__version__ = "0.3.0"

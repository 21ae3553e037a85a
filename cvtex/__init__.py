"""
cvtex - structured résumé editing and deterministic LaTeX/preview rendering

Turns a structured résumé record into a LaTeX document source and a print-ready
preview, with an editor-side record store around it.

Architecture:
- Templating Context: Résumé data model, escaping, LaTeX and preview rendering
- Editing Context: Record store, commit subscribers, JSON persistence
"""

__version__ = "0.1.0"

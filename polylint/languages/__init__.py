"""Language profiles and their ordered rule sets."""

from polylint.languages import cpp, csharp, html, java, javascript, python
from polylint.languages.profile import ContentSignals, LanguageProfile, Signal, signal_matches

# Registry priority order.
LANGUAGE_MODULES = (csharp, html, python, java, cpp, javascript)

__all__ = [
    "LANGUAGE_MODULES",
    "ContentSignals",
    "LanguageProfile",
    "Signal",
    "cpp",
    "csharp",
    "html",
    "java",
    "javascript",
    "python",
    "signal_matches",
]

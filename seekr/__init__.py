# Seekr Package
"""
Query resolution engine for a keyboard launcher.

Turns one line of input into a ranked list of actionable results:
  - Direct answers: calculator, unit/currency converter, weather
  - Prefix commands: shell (>), web search (g / ?), system actions
  - Fallback search: applications, browser bookmarks, files
"""

__version__ = "0.1.0-dev"

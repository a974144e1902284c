# ABOUTME: Fandom Folio - structured fact extraction from wiki item pages
# ABOUTME: Package root; the CLI lives in fandom_folio.main

__version__ = "0.1.0"

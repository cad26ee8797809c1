"""
Core business logic modules for talentmatch.

Submodules:
- matching: skill similarity, skill scoring and talent ranking
"""

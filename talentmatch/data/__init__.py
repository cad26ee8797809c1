"""Data layer for talentmatch: value models exchanged with the engine."""

"""AJCC 7th to 8th edition TNM recoding and stage grouping for
HPV-associated oropharyngeal cancer."""

__version__ = '0.1.0'

"""Domain layer: user models and identifier generation.

Pure data and validation. No I/O, no imports from infrastructure or services.
"""

"""Pipeline steps: normalization, section segmentation and record extraction.

Each step is callable on its own so the parsers can be exercised on raw text
without a PDF.
"""

"""
Test suite for the richdoc_docx package.
"""

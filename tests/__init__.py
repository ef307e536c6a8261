"""
Test suite for the requirement_template project.
"""

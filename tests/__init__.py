"""
Test suite for the htmlquill project.
"""

"""
Browser-driven acceptance tests for Oppia's voiceover administration workflow.
"""

__version__ = '0.1.0'

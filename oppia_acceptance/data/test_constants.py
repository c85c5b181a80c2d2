# Shared Acceptance Test Constants

"""
URLs, role names and timeouts shared by page objects and test modules.
"""

from oppia_acceptance.config import TEST_CONFIG

DEFAULT_SPEC_TIMEOUT = TEST_CONFIG['default_spec_timeout']


class URLS:
    """Application paths, relative to the base URL."""

    LOGIN = '/login'
    SIGNUP = '/signup'
    CREATOR_DASHBOARD = '/creator-dashboard'
    ADMIN_ROLES_TAB = '/admin#/roles'

    @staticmethod
    def exploration_editor(exploration_id):
        return f'/create/{exploration_id}'


class Roles:
    """Role names as shown on the admin roles tab."""

    BLOG_ADMIN = 'blog admin'
    BLOG_POST_EDITOR = 'blog post editor'
    CURRICULUM_ADMIN = 'curriculum admin'
    MODERATOR = 'moderator'
    QUESTION_ADMIN = 'question admin'
    RELEASE_COORDINATOR = 'release coordinator'
    TRANSLATION_ADMIN = 'translation admin'
    VOICEOVER_ADMIN = 'voiceover admin'

    @classmethod
    def all(cls):
        return [
            value for name, value in vars(cls).items()
            if name.isupper() and isinstance(value, str)
        ]


# Dev-environment account that is allowed to grant roles
SUPER_ADMIN = {
    'username': 'superAdm',
    'email': 'testadmin@example.com',
}

# Console noise that is never a test failure
ignored_console_errors_for_all_tests = []

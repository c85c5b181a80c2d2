# Page Objects for Oppia acceptance testing

"""
Page Object Model for the Oppia voiceover administration workflow.

Each role is a page object class; UserFactory composes them into a single
user object per browser session.
"""

from .base_page import BasePage
from .base_user import BaseUser
from .super_admin_page import SuperAdmin
from .exploration_editor_page import ExplorationEditor, ExplorationPublishError
from .voiceover_admin_page import VoiceoverAdmin

__all__ = [
    'BasePage',
    'BaseUser',
    'SuperAdmin',
    'ExplorationEditor',
    'ExplorationPublishError',
    'VoiceoverAdmin'
]

# User Factory for Acceptance Tests

"""
Creates signed-up users, each with its own browser session, and grants them
roles through the dev super admin.

A user object combines the page objects for its roles, so a voiceover admin
can also use the exploration editor helpers every signed-in user has.
"""

import logging

from oppia_acceptance.data.test_constants import Roles, SUPER_ADMIN
from oppia_acceptance.page_objects import ExplorationEditor, SuperAdmin, VoiceoverAdmin
from oppia_acceptance.utils.browser import create_driver

logger = logging.getLogger(__name__)

# Page objects every signed-in user gets
BASE_USER_CLASSES = (ExplorationEditor,)

# Extra page objects per role; roles without one only change permissions
ROLE_CLASSES = {
    Roles.VOICEOVER_ADMIN: VoiceoverAdmin,
}


class UserCreationError(Exception):
    """Raised when a test user cannot be signed up."""
    pass


_composed_classes = {}


def compose_user_class(roles=()):
    """
    Build the user class for a set of roles.

    Args:
        roles: Role names from test_constants.Roles

    Returns:
        type: Class deriving from the role page objects and the base ones

    Raises:
        ValueError: If a role is unknown
    """
    known_roles = Roles.all()
    role_classes = []
    for role in roles:
        if role not in known_roles:
            raise ValueError(f"Unknown role: {role}")
        role_class = ROLE_CLASSES.get(role)
        if role_class and role_class not in role_classes:
            role_classes.append(role_class)

    bases = tuple(role_classes) + BASE_USER_CLASSES
    if bases not in _composed_classes:
        name = ''.join(base.__name__ for base in bases) + 'User'
        _composed_classes[bases] = type(name, bases, {})
    return _composed_classes[bases]


class UserFactory:
    """Tracks every user created during a test module."""

    _active_users = []
    _super_admin = None

    @classmethod
    def _open_and_sign_up(cls, user_class, username, email):
        driver = create_driver()
        user = user_class(driver, username, email)
        # Tracked before sign up so a failed sign up still gets its browser closed
        cls._active_users.append(user)

        try:
            user.sign_up_new_user()
        except AssertionError as e:
            logger.error(f"Sign up failed for {username}: {e}")
            raise UserCreationError(f"Could not sign up {username}: {e}") from e

        return user

    @classmethod
    def create_new_super_admin(cls):
        """Create the dev super admin once and reuse it afterwards."""
        if cls._super_admin is None:
            logger.info("Creating super admin")
            cls._super_admin = cls._open_and_sign_up(
                SuperAdmin, SUPER_ADMIN['username'], SUPER_ADMIN['email']
            )
        return cls._super_admin

    @classmethod
    def create_new_user(cls, username, email, roles=()):
        """
        Sign up a new user in a fresh browser and grant it roles.

        Args:
            username: Username to register
            email: Email used to sign in
            roles: Role names from test_constants.Roles

        Returns:
            BaseUser: Object exposing the page objects of the user's roles

        Raises:
            ValueError: If a role is unknown
            UserCreationError: If sign up fails
        """
        roles = list(roles)
        user_class = compose_user_class(roles)
        user = cls._open_and_sign_up(user_class, username, email)

        if roles:
            super_admin = cls.create_new_super_admin()
            for role in roles:
                super_admin.assign_role_to_user(username, role)

        logger.info(f"Created user {username} with roles {roles or 'none'}")
        return user

    @classmethod
    def active_users(cls):
        return list(cls._active_users)

    @classmethod
    def active_drivers(cls):
        """WebDriver sessions of every user still open."""
        return [user.driver for user in cls._active_users]

    @classmethod
    def close_browser_for_user(cls, user):
        """Close one user's browser and stop tracking it."""
        if user in cls._active_users:
            cls._active_users.remove(user)
            user.close_browser()
        if user is cls._super_admin:
            cls._super_admin = None

    @classmethod
    def close_all_browsers(cls):
        """Close every browser opened by the factory."""
        users, cls._active_users = cls._active_users, []
        cls._super_admin = None
        for user in users:
            user.close_browser()
        logger.info(f"Closed {len(users)} browser session(s)")

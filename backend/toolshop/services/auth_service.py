"""
Auth Service
Acceptance checks standing in for customer and admin authentication

There is no credential store: a customer login succeeds for any mobile
number of the right shape, an admin login for the configured pair.
"""
import logging
import re

from toolshop.core.config import Settings, settings as default_settings
from toolshop.core.exceptions import InvalidMobileNumberError

logger = logging.getLogger(__name__)


class AuthService:
    """Validates login input against configured constants"""

    def __init__(self, config: Settings = default_settings):
        self.config = config
        self._mobile_pattern = re.compile(config.MOBILE_PATTERN)

    def validate_mobile(self, mobile: str) -> str:
        """
        Check a mobile number before signing the customer in

        Raises:
            InvalidMobileNumberError: if the number does not match the pattern
        """
        mobile = (mobile or "").strip()
        if not self._mobile_pattern.match(mobile):
            logger.warning("Customer login rejected: invalid mobile number")
            raise InvalidMobileNumberError(mobile)
        return mobile

    def check_admin_credentials(self, username: str, password: str) -> bool:
        ok = username == self.config.ADMIN_USERNAME and password == self.config.ADMIN_PASSWORD
        if not ok:
            logger.warning(f"Admin login failed for user {username!r}")
        return ok

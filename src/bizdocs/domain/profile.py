"""Company profile domain service."""

import logging
from typing import Any, Optional
from bizdocs.database.base import Database
from bizdocs.domain.entities import Profile
from bizdocs.domain.errors import ValidationError
from bizdocs.utils.amount_parser import parse_amount

logger = logging.getLogger(__name__)


class ProfileService:
    """Service for reading and updating the company profile."""

    def __init__(self, db: Database):
        """Initialize profile service.

        Args:
            db: Database instance
        """
        self.db = db

    def get_profile(self) -> Profile:
        """Get the company profile.

        Returns:
            The saved profile, or an empty profile with default values
        """
        profile = self.db.get_profile()
        return profile if profile is not None else Profile()

    def update_profile(
        self,
        company_name: Optional[str] = None,
        address: Optional[str] = None,
        contact_number: Optional[str] = None,
        gst: Optional[str] = None,
        default_gst_rate: Optional[Any] = None,
    ) -> Profile:
        """Update profile fields; fields left as None keep their value.

        Raises:
            ValidationError: If the default GST rate is not a number or is negative
        """
        current = self.get_profile()

        rate = current.default_gst_rate
        if default_gst_rate is not None:
            try:
                rate = parse_amount(str(default_gst_rate))
            except ValueError as e:
                raise ValidationError(f"Invalid default GST rate: {e}")
            if rate < 0:
                raise ValidationError("Default GST rate cannot be negative")

        self.db.save_profile(
            company_name=company_name if company_name is not None else current.company_name,
            address=address if address is not None else current.address,
            contact_number=contact_number if contact_number is not None else current.contact_number,
            gst=gst if gst is not None else current.gst,
            default_gst_rate=rate,
        )
        logger.info("Updated company profile")
        return self.get_profile()

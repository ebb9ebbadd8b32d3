"""Explicit session context passed to services that act for the company."""

from dataclasses import dataclass, field
from decimal import Decimal

from bizdocs.database.base import Database
from bizdocs.domain.entities import Party, Profile
from bizdocs.domain.profile import ProfileService


@dataclass(frozen=True)
class SessionContext:
    """Who is issuing documents, and with which defaults."""

    profile: Profile = field(default_factory=Profile)

    @classmethod
    def from_database(cls, db: Database) -> "SessionContext":
        return cls(profile=ProfileService(db).get_profile())

    @property
    def default_gst_rate(self) -> Decimal:
        return self.profile.default_gst_rate

    def issuer(self) -> Party:
        """Issuer block for new documents."""
        return Party(
            name=self.profile.company_name,
            address=self.profile.address,
            contact_number=self.profile.contact_number,
            gst_number=self.profile.gst,
        )

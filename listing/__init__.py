"""
listing — six-step product listing wizard for a marketplace seller console.

    from listing import pricing as P     # Discount, fees, GST, earnings
    from listing import shipping as SH   # Volumetric / chargeable weight
    from listing import offers as O      # Promotional rule engine
    from listing import rules as R       # Per-step validation
    from listing import WizardController # The stateful session
"""

from listing import ids
from listing import settings
from listing import draft
from listing import catalog
from listing import pricing
from listing import shipping
from listing import variants
from listing import offers
from listing import media
from listing import content
from listing import delivery
from listing import rules
from listing import wizard
from listing.settings import WizardSettings, DEFAULT_SETTINGS
from listing.draft import ProductDraft
from listing.wizard import WizardController

__version__ = "0.1.0"

__all__ = (
    "ids",
    "settings",
    "draft",
    "catalog",
    "pricing",
    "shipping",
    "variants",
    "offers",
    "media",
    "content",
    "delivery",
    "rules",
    "wizard",
    "WizardSettings",
    "DEFAULT_SETTINGS",
    "ProductDraft",
    "WizardController",
)

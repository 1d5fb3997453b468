"""did:web registrar driver."""

from driver_did_web.plugins import DidWebDriver

__all__ = ["DidWebDriver"]

# This package groups the panel bodies used by the risk dashboard.
# Chart builders and the Risk Wall strip share one theme so panels read as a single page.

__all__ = ["charts", "risk_wall"]

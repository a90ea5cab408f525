"""Account-name validation and provisioning for NEAR-style networks."""

__version__ = "0.1.0"

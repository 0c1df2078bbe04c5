"""Release Retainer.

Computes which releases must be kept for a customer's deployment history:
the most recently deployed releases of every project/environment pairing,
merged and deduplicated.
"""

__version__ = "1.0.0"

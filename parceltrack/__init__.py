"""
Parcel tracker.

Stores parcels in a relational table and applies the tracker's lifecycle rules.
"""

__version__ = "0.1.0"

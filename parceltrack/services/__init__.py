from parceltrack.services.parcel_service import ParcelService, format_parcel

__all__ = ["ParcelService", "format_parcel"]

"""Form submission types — the multi-value data source."""

from izgood.http.forms import FormData, UploadFile

__all__ = ["FormData", "UploadFile"]

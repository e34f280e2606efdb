"""Infrastructure: persistence backends and photo blob storage."""

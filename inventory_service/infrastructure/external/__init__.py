"""External integrations: photo blob storage."""

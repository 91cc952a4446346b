"""Pure library code: roster indexing, district extraction, geocoding clients."""

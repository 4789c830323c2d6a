"""Packaged brand documents, one JSON file per brand id."""

"""Favorite store adapters implementing `FavoriteStore`."""
